"""Postal code validation, run before any upstream request."""

from __future__ import annotations

import re

from .domain import FailureOutcome, InvalidInput, PostalCode

# [0-9] rather than \d: only ASCII digits are valid
_CEP_PATTERN = re.compile(r"[0-9]{8}")


def validate_postal_code(raw: str | None) -> PostalCode | InvalidInput:
    """Return a ``PostalCode`` for exactly 8 ASCII digits, else INVALID_INPUT."""
    if raw is None or _CEP_PATTERN.fullmatch(raw) is None:
        return FailureOutcome.INVALID_INPUT
    return PostalCode(raw)
