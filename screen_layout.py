from typing import NamedTuple

from settings import (
    BODY_MIN_HEIGHT,
    FOOTER_HEIGHT,
    HEADER_HEIGHT,
    INFO_HEIGHT,
    MARGIN,
)


class Rect(NamedTuple):
    y: int
    x: int
    height: int
    width: int

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def empty(self) -> bool:
        return self.height <= 0 or self.width <= 0

    def inner(self, margin: int = 1) -> "Rect":
        return Rect(
            self.y + margin,
            self.x + margin,
            max(0, self.height - 2 * margin),
            max(0, self.width - 2 * margin),
        )

    def clip(self, bounds: "Rect") -> "Rect":
        y = max(self.y, bounds.y)
        x = max(self.x, bounds.x)
        height = max(0, min(self.bottom, bounds.bottom) - y)
        width = max(0, min(self.right, bounds.right) - x)
        return Rect(y, x, height, width)


class ScreenLayout:
    """
    Frame layout for a H x W screen. Recomputed every frame; holds no windows.

        header   (HEADER_HEIGHT rows)
        body     list | info/progress  (rest, at least BODY_MIN_HEIGHT rows)
        footer   (FOOTER_HEIGHT rows)
    """

    def __init__(self, H: int, W: int):
        self.H = max(0, H)
        self.W = max(0, W)
        self.screen = Rect(0, 0, self.H, self.W)

        frame = self.screen.inner(MARGIN)
        body_h = max(BODY_MIN_HEIGHT, frame.height - HEADER_HEIGHT - FOOTER_HEIGHT)

        header = Rect(frame.y, frame.x, HEADER_HEIGHT, frame.width)
        body = Rect(header.bottom, frame.x, body_h, frame.width)
        footer = Rect(body.bottom, frame.x, FOOTER_HEIGHT, frame.width)

        # left half rounds down; the odd column goes to the info side
        list_w = body.width // 2
        list_rect = Rect(body.y, body.x, body.height, list_w)
        info_col = Rect(body.y, body.x + list_w, body.height, body.width - list_w)

        info_h = min(INFO_HEIGHT, info_col.height)
        info = Rect(info_col.y, info_col.x, info_h, info_col.width)
        gauge = Rect(
            info.bottom, info_col.x, info_col.height - info_h, info_col.width
        )

        # anything pushed past the screen edge by the minimum heights is cut off
        self.header = header.clip(self.screen)
        self.body = body.clip(self.screen)
        self.footer = footer.clip(self.screen)
        self.list = list_rect.clip(self.screen)
        self.info = info.clip(self.screen)
        self.gauge = gauge.clip(self.screen)

    @classmethod
    def from_screen(cls, stdscr) -> "ScreenLayout":
        H, W = stdscr.getmaxyx()
        return cls(H, W)
