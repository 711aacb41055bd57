import curses

from settings import COUNTER_MAX, INITIAL_ITEMS, KEY_ESC


class AppState:
    """
    Central mutable application state.
    Mutated only through key dispatch; every transition is total.
    """

    def __init__(self, items=None):
        self.counter = 0
        self.should_quit = False
        self.items: list[str] = list(INITIAL_ITEMS if items is None else items)
        self.selected_index = 0

        self._bindings = {
            ord("q"): self.quit,
            KEY_ESC: self.quit,
            ord(" "): self.tick,
            curses.KEY_UP: self.select_previous,
            curses.KEY_DOWN: self.select_next,
            ord("a"): self.add_item,
            ord("d"): self.delete_selected,
        }

    def handle_key(self, ch):
        action = self._bindings.get(ch)
        if action is not None:
            action()

    def tick(self):
        self.counter = min(self.counter + 1, COUNTER_MAX)

    def quit(self):
        self.should_quit = True

    def select_previous(self):
        if self.selected_index > 0:
            self.selected_index -= 1

    def select_next(self):
        if self.selected_index + 1 < len(self.items):
            self.selected_index += 1

    def add_item(self):
        self.items.append(f"New Item {len(self.items) + 1}")

    def delete_selected(self):
        if not self.items:
            return
        del self.items[self.selected_index]
        # keep selection on the new last item
        if self.selected_index >= len(self.items) and self.selected_index > 0:
            self.selected_index -= 1

    def selected_item(self) -> str | None:
        if 0 <= self.selected_index < len(self.items):
            return self.items[self.selected_index]
        return None
