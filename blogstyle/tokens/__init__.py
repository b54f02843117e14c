"""Design tokens: type scale, label tables, transitions, units, and themes."""

from .lookups import FontFamily, FontWeight, ZIndex, family_of, weight_of, z_index_of
from .scale import (
    DEFAULT_SCALE,
    TypeScale,
    TypeScaleResult,
    compute_type_scale,
    scale_table,
    vertical_rhythm,
)
from .theme import DARK, LIGHT, Palette, ThemeMode, palette_for, theme_variables
from .transitions import build_transition
from .units import Length, px_to_rem, rem_to_px, strip_unit

__all__ = [
    "DEFAULT_SCALE",
    "TypeScale",
    "TypeScaleResult",
    "compute_type_scale",
    "scale_table",
    "vertical_rhythm",
    "FontWeight",
    "FontFamily",
    "ZIndex",
    "weight_of",
    "family_of",
    "z_index_of",
    "build_transition",
    "Length",
    "px_to_rem",
    "rem_to_px",
    "strip_unit",
    "ThemeMode",
    "Palette",
    "LIGHT",
    "DARK",
    "palette_for",
    "theme_variables",
]
