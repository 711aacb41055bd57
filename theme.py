import curses


class Theme:
    PAIR_ACCENT = 1
    PAIR_SELECTED = 2
    PAIR_INFO = 3
    PAIR_GAUGE = 4
    PAIR_QUIT_KEY = 5
    PAIR_TICK_KEY = 6

    # role -> (pair, extra attributes)
    ROLES = {
        "default": (0, 0),
        "title": (0, 0),
        "app_name": (PAIR_ACCENT, curses.A_BOLD),
        "selected": (PAIR_SELECTED, 0),
        "info": (PAIR_INFO, 0),
        "gauge": (PAIR_GAUGE, 0),
        "gauge_fill": (PAIR_GAUGE, curses.A_REVERSE),
        "quit_key": (PAIR_QUIT_KEY, curses.A_BOLD),
        "tick_key": (PAIR_TICK_KEY, curses.A_BOLD),
    }

    def __init__(self):
        self.colors = False

    def start(self):
        """Register color pairs; stays monochrome if the terminal refuses."""
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_ACCENT, curses.COLOR_CYAN, -1)
            curses.init_pair(self.PAIR_SELECTED, curses.COLOR_YELLOW, -1)
            curses.init_pair(self.PAIR_INFO, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_GAUGE, curses.COLOR_GREEN, -1)
            curses.init_pair(self.PAIR_QUIT_KEY, curses.COLOR_RED, -1)
            curses.init_pair(self.PAIR_TICK_KEY, curses.COLOR_GREEN, -1)
        except curses.error:
            self.colors = False
            return self
        self.colors = True
        return self

    def attr(self, role: str) -> int:
        pair, extra = self.ROLES.get(role, (0, 0))
        if self.colors and pair:
            return curses.color_pair(pair) | extra
        return extra
