import os
import tempfile
import unittest

import pandas as pd
import pytest

from column_layout import (
    NEWLINE_GLYPH,
    clip_to_width,
    compute_offsets,
    compute_widths,
    display_text,
    display_width,
)
from window import Window
from window_builder import build_window


def _window(headers, rows):
    return Window(
        headers=tuple(headers),
        first_row=0,
        last_row=len(rows) - 1,
        capacity=max(1, len(rows)),
        reached_end=True,
        rows=pd.DataFrame(rows),
    )


class ColumnLayoutTests(unittest.TestCase):
    def test_widths_and_offsets_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "abc.csv")
            with open(path, "w", encoding="utf-8") as f:
                f.write("a,b,c\n1,2,3\n4,55,6\n7,8,999\n")
            window = build_window(path, 0, 3)

        widths = compute_widths(window)
        self.assertEqual(widths, [1, 2, 3])
        self.assertEqual(compute_offsets(widths), [0, 2, 5])

    def test_widths_start_at_column_offset(self):
        window = _window(["a", "b", "c"], [["1", "2", "3"], ["4", "55", "6"], ["7", "8", "999"]])
        self.assertEqual(compute_widths(window, 1), [2, 3])
        self.assertEqual(compute_widths(window, 2), [3])
        self.assertEqual(compute_widths(window, 3), [])

    def test_header_wider_than_values(self):
        window = _window(["identifier", "x"], [["1", "yes"]])
        self.assertEqual(compute_widths(window), [10, 3])

    def test_empty_window_uses_headers(self):
        window = Window(headers=("name", "qty"), first_row=0, last_row=-1, capacity=5, reached_end=True)
        self.assertEqual(compute_widths(window), [4, 3])

    def test_embedded_newline_counts_as_one_cell(self):
        window = _window(["a"], [["x\ny"]])
        self.assertEqual(compute_widths(window), [3])

    def test_wide_characters_take_two_cells(self):
        window = _window(["city"], [["東京"]])
        self.assertEqual(compute_widths(window), [4])

    def test_offsets_step_by_width_plus_separator(self):
        widths = [4, 1, 0, 12, 7]
        offsets = compute_offsets(widths)
        self.assertEqual(offsets[0], 0)
        for i in range(len(widths) - 1):
            self.assertEqual(offsets[i + 1] - offsets[i], widths[i] + 1)
        self.assertEqual(offsets, sorted(offsets))

    def test_offsets_of_nothing(self):
        self.assertEqual(compute_offsets([]), [])


@pytest.mark.parametrize(
    "value, expected",
    [
        ("plain", "plain"),
        ("two\nlines", f"two{NEWLINE_GLYPH}lines"),
        ("crlf\r\nend", f"crlf{NEWLINE_GLYPH}end"),
        ("a\tb", "a·b"),
        ("", ""),
        (None, ""),
    ],
)
def test_display_text(value, expected):
    assert display_text(value) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("abc", 3),
        ("日本", 4),
        ("é", 1),
        ("", 0),
    ],
)
def test_display_width(text, expected):
    assert display_width(text) == expected


def test_clip_to_width_never_splits_wide_char():
    assert clip_to_width("日本語", 3) == "日"
    assert clip_to_width("hello", 3) == "hel"
    assert clip_to_width("hello", 0) == ""
