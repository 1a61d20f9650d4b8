from dataclasses import dataclass, field

import pandas as pd


@dataclass(frozen=True)
class Window:
    """A bounded run of consecutive records around the row being viewed.

    ``first_row`` and ``last_row`` are absolute data-row indexes (the header
    is not counted). An empty window has ``last_row == first_row - 1``.
    """

    headers: tuple
    first_row: int
    last_row: int
    capacity: int
    reached_end: bool = False
    rows: pd.DataFrame = field(default_factory=pd.DataFrame, compare=False)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return self.row_count == 0

    def has_row(self, row: int) -> bool:
        return self.first_row <= row <= self.last_row

    def record(self, row: int) -> list:
        """Fields of absolute data row ``row``; raises IndexError outside the window."""
        if not self.has_row(row):
            raise IndexError(f"row {row} outside window {self.first_row}-{self.last_row}")
        return [str(v) for v in self.rows.iloc[row - self.first_row].tolist()]


def empty_window(first_row: int, capacity: int, headers=(), reached_end=True) -> Window:
    return Window(
        headers=tuple(headers),
        first_row=first_row,
        last_row=first_row - 1,
        capacity=capacity,
        reached_end=reached_end,
    )
