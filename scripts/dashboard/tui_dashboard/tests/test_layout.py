from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from tui_dashboard.layout import (  # noqa: E402
    Direction,
    Flex,
    Length,
    Percentage,
    Rect,
    horizontal,
    select_layout_mode,
    split_exact,
    vertical,
)


class SplitTests(unittest.TestCase):
    def test_percentages_after_margin(self):
        top, below = vertical(Rect(0, 0, 10, 100), [Percentage(10), Percentage(5)], margin=1)
        self.assertEqual(top, Rect(0, 1, 10, 9))
        self.assertEqual(below, Rect(0, 10, 10, 4))

    def test_horizontal_margin_and_lengths(self):
        left, right = horizontal(Rect(0, 0, 100, 5), [Percentage(36), Percentage(57)], margin=3)
        self.assertEqual(left, Rect(3, 0, 33, 5))
        self.assertEqual(right, Rect(36, 0, 53, 5))

    def test_center_flex(self):
        (center,) = horizontal(Rect(0, 0, 20, 1), [Length(8)], flex=Flex.CENTER)
        self.assertEqual(center, Rect(6, 0, 8, 1))

    def test_center_flex_overflow_is_clipped(self):
        (center,) = horizontal(Rect(2, 0, 5, 1), [Length(8)], flex=Flex.CENTER)
        self.assertEqual(center, Rect(2, 0, 5, 1))

    def test_segments_past_the_end_are_clipped(self):
        first, second, third = horizontal(Rect(0, 0, 10, 2), [Length(6), Length(6), Length(3)])
        self.assertEqual(first.width, 6)
        self.assertEqual(second, Rect(6, 0, 4, 2))
        self.assertEqual(third, Rect(10, 0, 0, 2))

    def test_margin_larger_than_span(self):
        (region,) = vertical(Rect(0, 0, 4, 4), [Length(1)], margin=3)
        self.assertTrue(region.is_empty)
        self.assertEqual(region.intersection(Rect(0, 0, 4, 4)), region)

    def test_regions_stay_inside_parent(self):
        parent = Rect(5, 7, 23, 11)
        for direction in Direction:
            for region in split_exact(parent, [Percentage(60), Length(9), Percentage(50)], direction, margin=2):
                self.assertEqual(region.intersection(parent), region)
                self.assertGreaterEqual(region.width, 0)
                self.assertGreaterEqual(region.height, 0)

    def test_split_exact_rejects_wrong_arity(self):
        with mock.patch("tui_dashboard.layout.split", return_value=[Rect()]):
            with self.assertRaises(AssertionError):
                split_exact(Rect(0, 0, 10, 10), [Length(1), Length(2)], Direction.VERTICAL)

    def test_axis_helpers_check_arity(self):
        with mock.patch("tui_dashboard.layout.split", return_value=[]):
            with self.assertRaises(AssertionError):
                vertical(Rect(0, 0, 10, 10), [Length(1)])
            with self.assertRaises(AssertionError):
                horizontal(Rect(0, 0, 10, 10), [Length(1)])


class RectTests(unittest.TestCase):
    def test_area_and_edges(self):
        rect = Rect(2, 3, 4, 5)
        self.assertEqual(rect.area, 20)
        self.assertEqual((rect.right, rect.bottom), (6, 8))
        self.assertTrue(Rect(0, 0, 0, 5).is_empty)

    def test_disjoint_intersection_is_empty(self):
        self.assertTrue(Rect(0, 0, 2, 2).intersection(Rect(5, 5, 2, 2)).is_empty)


class LayoutModeTests(unittest.TestCase):
    def test_narrow(self):
        self.assertEqual(select_layout_mode(80), "narrow")

    def test_medium(self):
        self.assertEqual(select_layout_mode(120), "medium")

    def test_wide(self):
        self.assertEqual(select_layout_mode(180), "wide")


if __name__ == "__main__":
    unittest.main()
