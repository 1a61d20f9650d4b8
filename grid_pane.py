# ~/Apps/tabpeek/grid_pane.py
import curses

from column_layout import (
    clip_to_width,
    compute_offsets,
    compute_widths,
    display_text,
)
from palette import Palette


class GridPane:
    RIGHT_MARGIN = 2

    def __init__(self, palette=None):
        self.palette = palette or Palette()
        # geometry of the last frame, kept for the status line and tests
        self.widths = []
        self.offsets = []
        self.visible_rows = range(0)

    @staticmethod
    def first_visible_row(window, target_row, height):
        # vertically centre the target row, never above the buffered rows
        return max(window.first_row, target_row - height // 2, 0)

    def _put(self, win, y, x, text, limit, attr):
        room = limit - x
        if room <= 0:
            return
        text = clip_to_width(text, room)
        if not text:
            return
        try:
            win.addstr(y, x, text, attr)
        except curses.error:
            pass

    def draw(self, win, window, target_row, target_column):
        win.erase()
        h, w = win.getmaxyx()
        self.widths = []
        self.offsets = []
        self.visible_rows = range(0)

        if window is None or window.is_empty:
            win.refresh()
            return

        limit = w - self.RIGHT_MARGIN
        self.widths = compute_widths(window, target_column)
        self.offsets = compute_offsets(self.widths)

        first = self.first_visible_row(window, target_row, h)
        last = min(window.last_row, first + max(0, h - 2))
        self.visible_rows = range(first, last + 1)
        label_w = len(str(last + 1)) + 1

        # header
        for i, name in enumerate(window.headers[target_column:]):
            x = label_w + self.offsets[i]
            if x >= limit:
                break
            attr = self.palette.cell_attr(target_column + i, header=True)
            self._put(win, 0, x, display_text(name), limit, attr)

        # rows
        block = window.rows.iloc[
            first - window.first_row : last - window.first_row + 1, target_column:
        ]
        label_attr = self.palette.label_attr()
        for y, values in enumerate(block.itertuples(index=False, name=None), start=1):
            row = first + y - 1
            self._put(win, y, 0, str(row + 1), label_w - 1, label_attr)
            for i, value in enumerate(values):
                x = label_w + self.offsets[i]
                if x >= limit:
                    break
                attr = self.palette.cell_attr(target_column + i)
                self._put(win, y, x, display_text(value), limit, attr)

        win.refresh()
