"""CSS lengths and unit conversion."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from ..config import CSS_PRECISION, ROOT_FONT_PX

_LENGTH_RE = re.compile(r"^\s*(?P<value>[-+]?(?:\d+\.?\d*|\.\d+))\s*(?P<unit>[a-z%]*)\s*$", re.IGNORECASE)


def format_number(value: float, precision: int = CSS_PRECISION) -> str:
    """Format a number for CSS output (fixed precision, trailing zeros trimmed)."""
    if not math.isfinite(value):
        raise ValueError(f"cannot write non-finite number to CSS: {value}")
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


@dataclass(frozen=True)
class Length:
    value: float
    unit: str = "rem"

    def css(self) -> str:
        number = format_number(self.value)
        if number == "0":
            return "0"
        return f"{number}{self.unit}"

    def __mul__(self, factor: float) -> Length:
        return Length(self.value * factor, self.unit)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return self.css()


def px_to_rem(px: float, root_px: float = ROOT_FONT_PX) -> Length:
    """Convert a pixel size to rem against the root font size."""
    if root_px <= 0:
        raise ValueError("root_px must be > 0")
    return Length(px / root_px, "rem")


def rem_to_px(rem: float, root_px: float = ROOT_FONT_PX) -> Length:
    if root_px <= 0:
        raise ValueError("root_px must be > 0")
    return Length(rem * root_px, "px")


def base_unit_size(unit: str, root_px: float = ROOT_FONT_PX) -> float:
    """Size of one base unit (1rem) expressed in ``unit``."""
    if unit in ("rem", "em"):
        return 1.0
    if unit == "px":
        if root_px <= 0:
            raise ValueError("root_px must be > 0")
        return root_px
    raise ValueError(f"unsupported scale unit: {unit!r}")


def strip_unit(text: str) -> float:
    """Return the numeric part of a CSS length such as ``"1.5rem"``."""
    match = _LENGTH_RE.match(text or "")
    if not match:
        raise ValueError(f"not a CSS length: {text!r}")
    return float(match.group("value"))
