"""Drawing primitives over a curses window.

Every primitive clips to the Rect it is given and never raises on small or
shrinking screens: curses rejects writes past the window edge (and the very
last cell of the screen), and those rejections are dropped here.
"""

import curses

from screen_layout import Rect

BORDER_H = "─"
BORDER_V = "│"
CORNERS = ("┌", "┐", "└", "┘")


def put_text(win, y: int, x: int, text: str, limit: int, attr: int = 0):
    if limit <= 0 or not text:
        return
    try:
        win.addnstr(y, x, text, limit, attr)
    except curses.error:
        pass


def draw_block(win, rect: Rect, title: str | None = None, attr: int = 0) -> Rect:
    """Draw a box border around rect and return the area inside it."""
    if rect.height < 2 or rect.width < 2:
        return Rect(rect.y, rect.x, 0, 0)

    top_left, top_right, bottom_left, bottom_right = CORNERS
    span = BORDER_H * (rect.width - 2)
    put_text(win, rect.y, rect.x, top_left + span + top_right, rect.width, attr)
    for y in range(rect.y + 1, rect.bottom - 1):
        put_text(win, y, rect.x, BORDER_V, 1, attr)
        put_text(win, y, rect.right - 1, BORDER_V, 1, attr)
    put_text(
        win, rect.bottom - 1, rect.x, bottom_left + span + bottom_right, rect.width, attr
    )

    if title:
        put_text(win, rect.y, rect.x + 1, title, rect.width - 2, attr)

    return rect.inner()


def line_width(spans) -> int:
    return sum(len(text) for text, _ in spans)


def draw_line(win, rect: Rect, row: int, spans, align: str = "left"):
    """Draw (text, attr) spans on one row of rect, truncated to its width."""
    if rect.empty or row < 0 or row >= rect.height:
        return

    total = line_width(spans)
    offset = 0
    if align == "center" and total < rect.width:
        offset = (rect.width - total) // 2

    y = rect.y + row
    x = rect.x + offset
    for text, attr in spans:
        room = rect.right - x
        if room <= 0:
            break
        put_text(win, y, x, text, room, attr)
        x += len(text)


def gauge_fill_width(width: int, percent: int) -> int:
    percent = max(0, min(100, percent))
    # round half up, so 50% of an odd width fills the middle cell
    return (width * percent + 50) // 100


def draw_gauge(win, rect: Rect, percent: int, label: str, attr: int = 0, fill_attr: int = 0):
    """Fill rect left-to-right to percent, with label centered on the middle row."""
    if rect.empty:
        return

    filled = gauge_fill_width(rect.width, percent)
    for y in range(rect.y, rect.bottom):
        put_text(win, y, rect.x, " " * filled, filled, fill_attr)

    label = label[: rect.width]
    label_y = rect.y + rect.height // 2
    label_x = rect.x + (rect.width - len(label)) // 2
    for i, ch in enumerate(label):
        col = label_x + i - rect.x
        put_text(win, label_y, label_x + i, ch, 1, fill_attr if col < filled else attr)
