import curses
from dataclasses import dataclass


COLOR_NAMES = {
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}

DEFAULT_COLORS = ("cyan", "green", "yellow", "red", "magenta")
PALETTE_SIZE = len(DEFAULT_COLORS)


@dataclass(frozen=True)
class Palette:
    """Column colors, cycled by column index. Pair 1 is the row label."""

    colors: tuple = DEFAULT_COLORS
    PAIR_LABEL = 1
    PAIR_BASE = 2

    @classmethod
    def from_names(cls, names):
        names = tuple(names or ())
        if len(names) != PALETTE_SIZE or any(n not in COLOR_NAMES for n in names):
            return cls()
        return cls(names)

    @property
    def size(self) -> int:
        return len(self.colors)

    def pair_for(self, column_index: int) -> int:
        return self.PAIR_BASE + column_index % self.size

    def init_pairs(self):
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_LABEL, curses.COLOR_WHITE, -1)
            for i, name in enumerate(self.colors):
                curses.init_pair(self.PAIR_BASE + i, COLOR_NAMES[name], -1)
        except curses.error:
            pass

    def cell_attr(self, column_index: int, header: bool = False) -> int:
        attr = curses.color_pair(self.pair_for(column_index))
        if header:
            attr |= curses.A_BOLD
        return attr

    def label_attr(self) -> int:
        return curses.color_pair(self.PAIR_LABEL) | curses.A_DIM
