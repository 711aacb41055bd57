import curses

import pytest


class DummyScreen:
    """In-memory stand-in for a curses window.

    Mirrors the curses behaviour the app relies on: writes outside the window
    raise curses.error, text running past the right edge is written up to the
    edge and then raises.
    """

    def __init__(self, h=24, w=80, keys=()):
        self.keys = list(keys)
        self.frames = 0
        self.nodelay_calls = []
        self.timeout_calls = []
        self._resize(h, w)

    def _resize(self, h, w):
        self._h = h
        self._w = w
        self.erase()

    def getmaxyx(self):
        return self._h, self._w

    def erase(self):
        self.cells = [[" "] * self._w for _ in range(self._h)]
        self.attrs = [[0] * self._w for _ in range(self._h)]

    def addnstr(self, y, x, text, n, attr=0):
        if not (0 <= y < self._h and 0 <= x < self._w):
            raise curses.error("addnstr() returned ERR")
        for i, ch in enumerate(text[:n]):
            if x + i >= self._w:
                raise curses.error("addnstr() returned ERR")
            self.cells[y][x + i] = ch
            self.attrs[y][x + i] = attr

    def refresh(self):
        self.frames += 1

    def nodelay(self, flag):
        self.nodelay_calls.append(flag)

    def timeout(self, delay):
        self.timeout_calls.append(delay)

    def getch(self):
        if not self.keys:
            raise AssertionError("getch() called with no keys left")
        key = self.keys.pop(0)
        # ("resize", h, w) simulates the terminal changing size
        if isinstance(key, tuple):
            _, h, w = key
            self._resize(h, w)
            return curses.KEY_RESIZE
        return key

    def row(self, y):
        return "".join(self.cells[y])

    def text(self):
        return "\n".join(self.row(y) for y in range(self._h))


class RoleTheme:
    """Theme that gives every role a distinct attribute value."""

    def __init__(self):
        self.codes = {}

    def attr(self, role):
        return self.codes.setdefault(role, 1 << (len(self.codes) + 8))


@pytest.fixture
def make_screen():
    return DummyScreen


@pytest.fixture
def role_theme():
    return RoleTheme()
