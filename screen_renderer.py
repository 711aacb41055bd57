from screen_layout import ScreenLayout
from settings import (
    APP_NAME,
    GAUGE_MAX,
    HEADER_TITLE,
    INFO_TITLE,
    LIST_TITLE,
    PROGRESS_TITLE,
)
from widgets import draw_block, draw_gauge, draw_line


def header_spans(theme):
    return [
        ("Welcome to ", theme.attr("default")),
        (APP_NAME, theme.attr("app_name")),
        (" Example!", theme.attr("default")),
    ]


def footer_spans(theme):
    return [
        ("Press ", theme.attr("default")),
        ("q", theme.attr("quit_key")),
        (" to quit, ", theme.attr("default")),
        ("Space", theme.attr("tick_key")),
        (" to increment counter", theme.attr("default")),
    ]


def list_rows(state, theme):
    rows = []
    for i, item in enumerate(state.items):
        if i == state.selected_index:
            rows.append([("> ", theme.attr("default")), (item, theme.attr("selected"))])
        else:
            rows.append([("  ", theme.attr("default")), (item, theme.attr("default"))])
    return rows


def info_lines(state):
    return [
        f"Counter: {state.counter}",
        f"Selected: {state.selected_index}",
        f"Items: {len(state.items)}",
    ]


def gauge_percent(counter: int) -> int:
    # counter runs to 255; anything past 100 shows a full bar
    return max(0, min(counter, GAUGE_MAX))


class ScreenRenderer:
    """
    Draws one full frame from AppState onto a curses window.
    Layout is taken fresh from the window size on each call.
    """

    def __init__(self, win, theme):
        self.win = win
        self.theme = theme

    def draw(self, state, layout: ScreenLayout | None = None):
        if layout is None:
            layout = ScreenLayout.from_screen(self.win)
        self.draw_header(layout.header)
        self.draw_list(state, layout.list)
        self.draw_info(state, layout.info)
        self.draw_gauge(state, layout.gauge)
        self.draw_footer(layout.footer)

    def draw_header(self, rect):
        inner = draw_block(self.win, rect, HEADER_TITLE, self.theme.attr("title"))
        draw_line(self.win, inner, 0, header_spans(self.theme), align="center")

    def draw_list(self, state, rect):
        inner = draw_block(self.win, rect, LIST_TITLE, self.theme.attr("title"))
        for row, spans in enumerate(list_rows(state, self.theme)):
            if row >= inner.height:
                break
            draw_line(self.win, inner, row, spans)

    def draw_info(self, state, rect):
        inner = draw_block(self.win, rect, INFO_TITLE, self.theme.attr("title"))
        attr = self.theme.attr("info")
        for row, text in enumerate(info_lines(state)):
            draw_line(self.win, inner, row, [(text, attr)])

    def draw_gauge(self, state, rect):
        inner = draw_block(self.win, rect, PROGRESS_TITLE, self.theme.attr("title"))
        percent = gauge_percent(state.counter)
        draw_gauge(
            self.win,
            inner,
            percent,
            f"{percent}%",
            attr=self.theme.attr("gauge"),
            fill_attr=self.theme.attr("gauge_fill"),
        )

    def draw_footer(self, rect):
        inner = draw_block(self.win, rect, attr=self.theme.attr("title"))
        draw_line(self.win, inner, 0, footer_spans(self.theme), align="center")
