import curses

from screen_layout import ScreenLayout
from screen_renderer import ScreenRenderer
from theme import Theme

# events getch can hand back that are not key presses
NON_KEY_EVENTS = (-1, curses.KEY_RESIZE, curses.KEY_MOUSE)


class Orchestrator:
    def __init__(self, stdscr, app_state, theme=None):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        # block on getch; no polling
        self.stdscr.nodelay(False)
        self.stdscr.timeout(-1)

        self.state = app_state
        self.theme = theme if theme is not None else Theme().start()
        self.renderer = ScreenRenderer(stdscr, self.theme)

    # ---------------- UI ----------------

    def redraw(self):
        self.stdscr.erase()
        layout = ScreenLayout.from_screen(self.stdscr)
        self.renderer.draw(self.state, layout)
        self.stdscr.refresh()

    # ---------------- main loop ----------------

    def run(self):
        while not self.state.should_quit:
            self.redraw()
            ch = self.stdscr.getch()

            # resize is picked up by the next redraw; mouse is not handled
            if ch in NON_KEY_EVENTS:
                continue

            self.state.handle_key(ch)
