"""Typographic scale: font sizes along a geometric progression with paired leading."""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, Field

from ..config import (
    BASE_SIZE,
    BASE_UNIT,
    LINE_HEIGHT_INTERCEPT,
    LINE_HEIGHT_SLOPE,
    SCALE_RATIO,
)
from .units import Length, base_unit_size, format_number

ScaleStep = int


class TypeScale(BaseModel):
    """Parameters of a geometric type scale."""

    model_config = {"frozen": True}

    base_size: float = Field(default=BASE_SIZE, gt=0)
    ratio: float = Field(default=SCALE_RATIO, gt=1.0)
    slope: float = Field(default=LINE_HEIGHT_SLOPE, lt=0.0)
    intercept: float = LINE_HEIGHT_INTERCEPT
    unit: Literal["rem", "em", "px"] = BASE_UNIT


DEFAULT_SCALE = TypeScale()


class TypeScaleResult(BaseModel):
    """Font size and line height for one scale step."""

    model_config = {"frozen": True}

    step: int
    font_size: float
    line_height: float
    unit: str = BASE_UNIT

    @property
    def font_size_css(self) -> str:
        return Length(self.font_size, self.unit).css()

    @property
    def line_height_css(self) -> str:
        return format_number(self.line_height)

    def declarations(self) -> dict[str, str]:
        return {"font-size": self.font_size_css, "line-height": self.line_height_css}


def _int_pow(base: float, exponent: int) -> float:
    # Integer powers only: repeated multiplication or division.
    # inf and 0.0 are fixed points, so the loop stops once it reaches one.
    result = 1.0
    if exponent > 0:
        for _ in range(exponent):
            result *= base
            if math.isinf(result):
                break
    elif exponent < 0:
        for _ in range(-exponent):
            result /= base
            if result == 0.0:
                break
    return result


def compute_type_scale(step: ScaleStep, scale: TypeScale = DEFAULT_SCALE) -> TypeScaleResult:
    """Compute the font size and line height for a scale step.

    Args:
        step: Position relative to the base size (any integer)
        scale: Scale parameters

    Returns:
        TypeScaleResult with font size (in ``scale.unit``) and unitless line height

    Raises:
        TypeError: If step is not an integer
    """
    if isinstance(step, bool) or not isinstance(step, int):
        raise TypeError(f"scale step must be an int, got {type(step).__name__}")

    font_size = scale.base_size * _int_pow(scale.ratio, step)
    line_height = scale.slope * (font_size / base_unit_size(scale.unit)) + scale.intercept
    return TypeScaleResult(step=step, font_size=font_size, line_height=line_height, unit=scale.unit)


def scale_table(start: int, stop: int, scale: TypeScale = DEFAULT_SCALE) -> list[TypeScaleResult]:
    """Results for every step in ``[start, stop]``."""
    if start > stop:
        raise ValueError(f"start ({start}) must be <= stop ({stop})")
    return [compute_type_scale(step, scale) for step in range(start, stop + 1)]


def vertical_rhythm(line_height: float, multiplier: float = 1.0) -> Length:
    """Block spacing derived from a line height, in ``em`` of the element's own font size."""
    return Length(line_height * multiplier, "em")
