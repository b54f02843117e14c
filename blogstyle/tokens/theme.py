"""Light/dark theme palettes exposed as CSS custom properties."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from ..errors import UnknownTokenError


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class Palette(BaseModel):
    """Colors for one display mode."""

    model_config = {"frozen": True}

    bg: str
    fg: str
    muted: str
    border: str
    link: str
    accent: str
    code_bg: str
    comment_bg: str


LIGHT = Palette(
    bg="#fdfdfc",
    fg="#1b1b1a",
    muted="#6b6b68",
    border="#e4e3df",
    link="#0b5ed7",
    accent="#c2410c",
    code_bg="#f3f2ee",
    comment_bg="#f7f6f3",
)

DARK = Palette(
    bg="#161615",
    fg="#e8e6e1",
    muted="#9a9893",
    border="#2e2d2b",
    link="#7aa7ff",
    accent="#fb923c",
    code_bg="#1f1f1d",
    comment_bg="#1c1c1a",
)


def parse_mode(mode: ThemeMode | str) -> ThemeMode:
    if isinstance(mode, ThemeMode):
        return mode
    try:
        return ThemeMode(str(mode).strip().lower())
    except ValueError:
        raise UnknownTokenError("theme", str(mode), [m.value for m in ThemeMode]) from None


def palette_for(mode: ThemeMode | str) -> Palette:
    """Palette used for the base (``:root``) rules of a mode. ``auto`` starts light."""
    return DARK if parse_mode(mode) is ThemeMode.DARK else LIGHT


def theme_variables(palette: Palette) -> dict[str, str]:
    """Map a palette to custom properties: ``code_bg`` -> ``--code-bg``."""
    return {f"--{name.replace('_', '-')}": value for name, value in palette.model_dump().items()}
