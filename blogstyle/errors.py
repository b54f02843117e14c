"""Exceptions raised while resolving design tokens."""

from __future__ import annotations


class TokenError(Exception):
    """Base class for design token failures."""


class UnknownTokenError(TokenError, KeyError):
    """Raised when a label is not registered in a token table."""

    def __init__(self, table: str, label: str, known: list[str] | None = None):
        self.table = table
        self.label = label
        self.known = sorted(known or [])
        super().__init__(table, label)

    def __str__(self) -> str:
        msg = f"unknown {self.table} token: {self.label!r}"
        if self.known:
            msg += f" (expected one of: {', '.join(self.known)})"
        return msg


class TokenTableError(TokenError):
    """Raised at import time when a token table does not cover its enum exactly."""
