import enum


class Command(enum.Enum):
    DOWN = "down"
    UP = "up"
    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    HOME = "home"
    RIGHT = "right"
    LEFT = "left"
    RESIZE = "resize"
    QUIT = "quit"


class NavigationController:
    def __init__(self, cache, start_row=0, page_step=100):
        self.cache = cache
        self.page_step = max(1, page_step)
        self.target_row = max(0, start_row)
        self.target_column = 0
        self._sync_window()

    @property
    def window(self):
        return self.cache.window

    @property
    def column_count(self):
        return self.window.column_count if self.window is not None else 0

    def _at_end(self):
        window = self.window
        return window is not None and window.reached_end and self.target_row >= window.last_row

    def _sync_window(self):
        window = self.cache.ensure(self.target_row)
        # a short file asked for a row past its end: settle on the last row
        if window.reached_end and not window.is_empty and self.target_row > window.last_row:
            self.target_row = window.last_row
        if self.target_column > max(0, window.column_count - 1):
            self.target_column = max(0, window.column_count - 1)

    # ---------- rows ----------
    def move_down(self):
        if not self._at_end():
            self.target_row += 1

    def move_up(self):
        if self.target_row > 0:
            self.target_row -= 1

    def page_down(self):
        if self._at_end():
            return
        before = self.window
        self.target_row += self.page_step
        self._sync_window()
        window = self.window
        if not (window.is_empty and window.reached_end) or before is None or before.is_empty:
            return
        # the page overshot the end of the file: fall back to the last row known to exist
        self.target_row = max(self.target_row - self.page_step, before.last_row)
        self._sync_window()
        if self.window.reached_end and not self.window.is_empty:
            self.target_row = self.window.last_row

    def page_up(self):
        self.target_row = max(0, self.target_row - self.page_step)

    def home(self):
        self.target_row = 0

    # ---------- columns ----------
    def move_right(self):
        if self.target_column < self.column_count - 1:
            self.target_column += 1

    def move_left(self):
        if self.target_column > 0:
            self.target_column -= 1

    def handle(self, command) -> bool:
        """Apply one command; returns False once the viewer should quit."""
        if command is Command.QUIT:
            return False
        action = {
            Command.DOWN: self.move_down,
            Command.UP: self.move_up,
            Command.PAGE_DOWN: self.page_down,
            Command.PAGE_UP: self.page_up,
            Command.HOME: self.home,
            Command.RIGHT: self.move_right,
            Command.LEFT: self.move_left,
        }.get(command)
        if action is not None:
            action()
            self._sync_window()
        return True
