import curses
import locale
import os
import sys

from settings import ESCDELAY_MS

# Make ESC snappy
os.environ.setdefault("ESCDELAY", ESCDELAY_MS)
from orchestrator import Orchestrator
from app_state import AppState


def curses_main(stdscr):
    state = AppState()
    Orchestrator(stdscr, state).run()
    return state


def main():
    # box-drawing and arrow glyphs need the user's (UTF-8) locale
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass

    try:
        curses.wrapper(curses_main)
    except curses.error as e:
        print(f"tuidemo: terminal error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
