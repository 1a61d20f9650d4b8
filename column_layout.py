import re
import unicodedata

import numpy as np


NEWLINE_GLYPH = "⏎"
CONTROL_GLYPH = "·"

_NEWLINES = re.compile(r"\r\n|\n|\r")


def display_text(value) -> str:
    """Text of a field as drawn: one terminal row, no control characters."""
    if value is None:
        return ""
    text = _NEWLINES.sub(NEWLINE_GLYPH, str(value))
    if text.isprintable():
        return text
    return "".join(
        CONTROL_GLYPH if unicodedata.category(ch) == "Cc" else ch for ch in text
    )


def char_width(ch: str) -> int:
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    if text.isascii():
        return len(text)
    return sum(char_width(ch) for ch in text)


def clip_to_width(text: str, max_cols: int) -> str:
    """Longest prefix of ``text`` that fits in ``max_cols`` terminal cells."""
    if max_cols <= 0:
        return ""
    if text.isascii():
        return text[:max_cols]
    used = 0
    for i, ch in enumerate(text):
        w = char_width(ch)
        if used + w > max_cols:
            return text[:i]
        used += w
    return text


def _cell_width(value) -> int:
    return display_width(display_text(value))


def compute_widths(window, column_offset: int = 0) -> list:
    """Width of every column from ``column_offset`` on.

    A column is as wide as the widest of its header and the fields buffered
    in the window.
    """
    widths = []
    column_offset = max(0, column_offset)
    for c in range(column_offset, window.column_count):
        width = _cell_width(window.headers[c])
        if window.row_count and c in window.rows.columns:
            width = max(width, int(window.rows[c].map(_cell_width).max()))
        widths.append(width)
    return widths


def compute_offsets(widths) -> list:
    """Start position of each column: one separator cell after the previous."""
    if len(widths) == 0:
        return []
    steps = np.asarray(widths, dtype=np.int64) + 1
    offsets = np.concatenate(([0], np.cumsum(steps)[:-1]))
    return [int(x) for x in offsets]
