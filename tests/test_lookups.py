"""Tests for the closed token tables."""

from __future__ import annotations

import unittest
from enum import Enum

from blogstyle.errors import TokenTableError, UnknownTokenError
from blogstyle.tokens.lookups import (
    FontFamily,
    FontWeight,
    ZIndex,
    _validate_table,
    family_of,
    weight_of,
    z_index_of,
)


class TestWeightOf(unittest.TestCase):
    def test_known_labels(self) -> None:
        self.assertEqual(weight_of("bold"), 700)
        self.assertEqual(weight_of("light"), 300)
        self.assertEqual(weight_of(FontWeight.REGULAR), 400)

    def test_labels_are_case_insensitive(self) -> None:
        self.assertEqual(weight_of(" Bold "), 700)

    def test_unknown_label_fails(self) -> None:
        with self.assertRaises(UnknownTokenError) as ctx:
            weight_of("ultra")
        self.assertIn("ultra", str(ctx.exception))
        self.assertIn("font-weight", str(ctx.exception))

    def test_unknown_label_is_key_error(self) -> None:
        with self.assertRaises(KeyError):
            weight_of("ultra")


class TestFamilyOf(unittest.TestCase):
    def test_stacks_end_with_generic_family(self) -> None:
        self.assertTrue(family_of("sans").endswith("sans-serif"))
        self.assertTrue(family_of(FontFamily.SERIF).endswith("serif"))
        self.assertTrue(family_of("mono").endswith("monospace"))

    def test_unknown_label_fails(self) -> None:
        with self.assertRaises(UnknownTokenError):
            family_of("cursive")


class TestZIndexOf(unittest.TestCase):
    def test_layers_are_ordered(self) -> None:
        order = [ZIndex.BASE, ZIndex.RAISED, ZIndex.STICKY, ZIndex.HEADER, ZIndex.OVERLAY, ZIndex.MODAL, ZIndex.TOAST]
        values = [z_index_of(z) for z in order]
        self.assertEqual(values, sorted(values))
        self.assertEqual(len(set(values)), len(values))

    def test_unknown_label_fails(self) -> None:
        with self.assertRaises(UnknownTokenError):
            z_index_of("tooltip")


class TestValidateTable(unittest.TestCase):
    def test_every_enum_has_an_entry(self) -> None:
        for enum_cls, lookup in ((FontWeight, weight_of), (FontFamily, family_of), (ZIndex, z_index_of)):
            for member in enum_cls:
                lookup(member)

    def test_missing_entry_rejected(self) -> None:
        class Size(Enum):
            S = "s"
            M = "m"

        with self.assertRaises(TokenTableError):
            _validate_table(Size, {Size.S: 1})

    def test_stray_key_rejected(self) -> None:
        class Size(Enum):
            S = "s"

        with self.assertRaises(TokenTableError):
            _validate_table(Size, {Size.S: 1, "xl": 2})


if __name__ == "__main__":
    unittest.main()
