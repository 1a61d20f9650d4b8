import logging


logger = logging.getLogger(__name__)


def covers(window, row: int, column: int = 0) -> bool:
    """Whether ``window`` can serve ``row`` without a rescan.

    Columns are always fully buffered, so ``column`` never causes a miss. A
    window that reached the end of the file answers for every row at or
    after its start, which is what stops further downward fetching.
    """
    if window is None:
        return False
    if window.first_row <= row <= window.last_row:
        return True
    return window.reached_end and row >= window.first_row


class WindowCache:
    def __init__(self, builder, capacity: int = 10000):
        # builder(target_row, capacity) -> Window
        self.builder = builder
        self.capacity = max(1, capacity)
        self.rebuilds = 0
        self._window = None

    @property
    def window(self):
        return self._window

    def invalidate(self):
        self._window = None

    def ensure(self, row: int):
        if covers(self._window, row):
            return self._window
        old = self._window
        self._window = None
        window = self.builder(max(0, row), self.capacity)
        self._window = window
        self.rebuilds += 1
        if old is not None:
            logger.debug(
                "miss on row %d: replaced window %d-%d with %d-%d",
                row,
                old.first_row,
                old.last_row,
                window.first_row,
                window.last_row,
            )
        return window

    @property
    def first_row(self) -> int:
        return self._window.first_row if self._window is not None else 0

    @property
    def last_row(self) -> int:
        return self._window.last_row if self._window is not None else -1

    @property
    def reached_end(self) -> bool:
        return bool(self._window is not None and self._window.reached_end)
