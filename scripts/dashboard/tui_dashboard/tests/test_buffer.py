from __future__ import annotations

import unittest
from pathlib import Path
import sys

from rich.style import Style
from rich.text import Text

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from tui_dashboard.buffer import Buffer, Cell  # noqa: E402
from tui_dashboard.layout import Rect  # noqa: E402


class BufferTests(unittest.TestCase):
    def test_starts_blank(self):
        buf = Buffer.empty(Rect(0, 0, 3, 2))
        self.assertEqual(buf.plain_lines(), ["   ", "   "])
        self.assertEqual(buf.cell(2, 1), Cell())

    def test_set_string_is_clipped(self):
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        end = buf.set_string(2, 0, "hello", Style(bold=True))
        self.assertEqual(buf.plain_lines(), ["  he"])
        self.assertEqual(end, 4)
        self.assertTrue(buf.cell(3, 0).style.bold)

    def test_wide_characters_take_two_cells(self):
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        buf.set_string(0, 0, "日本")
        self.assertEqual(buf.cell(0, 0).symbol, "日")
        self.assertEqual(buf.cell(1, 0).symbol, "")
        self.assertEqual(buf.cell(2, 0).symbol, "本")

    def test_paint_writes_inside_area(self):
        buf = Buffer.empty(Rect(0, 0, 5, 3))
        buf.paint(Text("hi", style="bold"), Rect(1, 1, 3, 1))
        self.assertEqual(buf.plain_lines(), ["     ", " hi  ", "     "])
        self.assertTrue(buf.cell(1, 1).style.bold)

    def test_paint_crops_to_area(self):
        buf = Buffer.empty(Rect(0, 0, 6, 2))
        buf.paint(Text("abcdef\nghijkl\nmnopqr", no_wrap=True, overflow="crop"), Rect(0, 0, 3, 1))
        self.assertEqual(buf.plain_lines(), ["abc   ", "      "])

    def test_paint_empty_area_is_noop(self):
        buf = Buffer.empty(Rect(0, 0, 3, 3))
        buf.paint(Text("x"), Rect(1, 1, 0, 0))
        self.assertEqual(buf, Buffer.empty(Rect(0, 0, 3, 3)))

    def test_cell_outside_raises(self):
        with self.assertRaises(IndexError):
            Buffer.empty(Rect(0, 0, 2, 2)).cell(2, 0)

    def test_reset_clears_cells(self):
        buf = Buffer.empty(Rect(0, 0, 2, 1))
        buf.set_string(0, 0, "ab")
        buf.reset()
        self.assertEqual(buf.plain_lines(), ["  "])


if __name__ == "__main__":
    unittest.main()
