"""Transition shorthand builder."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import TRANSITION_DURATION_VAR, TRANSITION_EASING


def build_transition(
    properties: Iterable[str],
    duration: str = TRANSITION_DURATION_VAR,
    easing: str = TRANSITION_EASING,
) -> str:
    """Build a ``transition`` value pairing each property with the shared duration and easing.

    Args:
        properties: Property names, in order
        duration: Duration shared by every entry (usually a CSS variable)
        easing: Timing function shared by every entry

    Returns:
        Comma-separated transition list, or ``"none"`` for no properties
    """
    entries: list[str] = []
    for prop in properties:
        name = prop.strip() if isinstance(prop, str) else ""
        if not name:
            raise ValueError(f"invalid transition property: {prop!r}")
        entries.append(f"{name} {duration} {easing}")
    if not entries:
        return "none"
    return ", ".join(entries)
