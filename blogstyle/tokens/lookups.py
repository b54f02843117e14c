"""Closed label tables: font weights, font stacks, and z-index layers."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from ..errors import TokenTableError, UnknownTokenError

E = TypeVar("E", bound=Enum)


class FontWeight(str, Enum):
    THIN = "thin"
    LIGHT = "light"
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    BLACK = "black"


class FontFamily(str, Enum):
    SANS = "sans"
    SERIF = "serif"
    MONO = "mono"


class ZIndex(str, Enum):
    BASE = "base"
    RAISED = "raised"
    STICKY = "sticky"
    HEADER = "header"
    OVERLAY = "overlay"
    MODAL = "modal"
    TOAST = "toast"


WEIGHTS: dict[FontWeight, int] = {
    FontWeight.THIN: 100,
    FontWeight.LIGHT: 300,
    FontWeight.REGULAR: 400,
    FontWeight.MEDIUM: 500,
    FontWeight.SEMIBOLD: 600,
    FontWeight.BOLD: 700,
    FontWeight.BLACK: 900,
}

FAMILIES: dict[FontFamily, str] = {
    FontFamily.SANS: (
        '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'
    ),
    FontFamily.SERIF: 'Charter, "Bitstream Charter", "Sitka Text", Cambria, Georgia, serif',
    FontFamily.MONO: 'ui-monospace, "SF Mono", Menlo, Consolas, "Liberation Mono", monospace',
}

Z_INDEX: dict[ZIndex, int] = {
    ZIndex.BASE: 0,
    ZIndex.RAISED: 1,
    ZIndex.STICKY: 100,
    ZIndex.HEADER: 200,
    ZIndex.OVERLAY: 900,
    ZIndex.MODAL: 1000,
    ZIndex.TOAST: 1100,
}


def _validate_table(enum_cls: type[Enum], table: dict[Any, Any]) -> None:
    missing = [m.value for m in enum_cls if m not in table]
    extra = [str(k) for k in table if not isinstance(k, enum_cls)]
    if missing or extra:
        raise TokenTableError(
            f"{enum_cls.__name__} table mismatch: missing={missing} extra={extra}"
        )


# Tables are checked once, at import.
_validate_table(FontWeight, WEIGHTS)
_validate_table(FontFamily, FAMILIES)
_validate_table(ZIndex, Z_INDEX)


def _resolve(enum_cls: type[E], label: E | str, table_name: str) -> E:
    if isinstance(label, enum_cls):
        return label
    key = str(label).strip().lower()
    try:
        return enum_cls(key)
    except ValueError:
        raise UnknownTokenError(table_name, str(label), [m.value for m in enum_cls]) from None


def weight_of(label: FontWeight | str) -> int:
    """Numeric font weight for a label, e.g. ``weight_of("bold") == 700``."""
    return WEIGHTS[_resolve(FontWeight, label, "font-weight")]


def family_of(label: FontFamily | str) -> str:
    """Font stack for a family label."""
    return FAMILIES[_resolve(FontFamily, label, "font-family")]


def z_index_of(label: ZIndex | str) -> int:
    """Stacking order for a layer label."""
    return Z_INDEX[_resolve(ZIndex, label, "z-index")]
