"""Tests for CSS lengths and unit conversion."""

from __future__ import annotations

import unittest

from blogstyle.tokens.units import (
    Length,
    base_unit_size,
    format_number,
    px_to_rem,
    rem_to_px,
    strip_unit,
)


class TestFormatNumber(unittest.TestCase):
    def test_trims_trailing_zeros(self) -> None:
        self.assertEqual(format_number(2.0), "2")
        self.assertEqual(format_number(1.5), "1.5")
        self.assertEqual(format_number(1.265625), "1.2656")

    def test_negative_zero(self) -> None:
        self.assertEqual(format_number(-0.00001), "0")

    def test_rejects_non_finite(self) -> None:
        for value in (float("inf"), float("-inf"), float("nan")):
            with self.assertRaises(ValueError):
                format_number(value)
        with self.assertRaises(ValueError):
            Length(float("inf"), "rem").css()


class TestLength(unittest.TestCase):
    def test_css(self) -> None:
        self.assertEqual(Length(1.25, "rem").css(), "1.25rem")
        self.assertEqual(str(Length(3, "px")), "3px")

    def test_zero_is_unitless(self) -> None:
        self.assertEqual(Length(0, "em").css(), "0")

    def test_scaling(self) -> None:
        self.assertEqual((Length(1.6, "em") * 2).css(), "3.2em")
        self.assertEqual((2 * Length(1.5, "rem")).css(), "3rem")


class TestConversion(unittest.TestCase):
    def test_px_to_rem(self) -> None:
        self.assertEqual(px_to_rem(24).css(), "1.5rem")
        self.assertEqual(px_to_rem(20, root_px=10).css(), "2rem")

    def test_rem_to_px(self) -> None:
        self.assertEqual(rem_to_px(2).css(), "32px")

    def test_invalid_root(self) -> None:
        with self.assertRaises(ValueError):
            px_to_rem(10, root_px=0)
        with self.assertRaises(ValueError):
            rem_to_px(1, root_px=-16)


class TestBaseUnitSize(unittest.TestCase):
    def test_sizes(self) -> None:
        self.assertEqual(base_unit_size("rem"), 1.0)
        self.assertEqual(base_unit_size("em"), 1.0)
        self.assertEqual(base_unit_size("px"), 16.0)
        self.assertEqual(base_unit_size("px", root_px=10), 10.0)

    def test_unsupported(self) -> None:
        with self.assertRaises(ValueError):
            base_unit_size("pt")


class TestStripUnit(unittest.TestCase):
    def test_strips(self) -> None:
        self.assertEqual(strip_unit("1.5rem"), 1.5)
        self.assertEqual(strip_unit("-2px"), -2.0)
        self.assertEqual(strip_unit(".5em"), 0.5)
        self.assertEqual(strip_unit("40%"), 40.0)

    def test_rejects_garbage(self) -> None:
        with self.assertRaises(ValueError):
            strip_unit("abc")
        with self.assertRaises(ValueError):
            strip_unit("")


if __name__ == "__main__":
    unittest.main()
