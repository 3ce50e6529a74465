"""Scalar number parsing helpers."""

from __future__ import annotations

import re

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.\d+|\d+\.\d*|\.\d+)$")
_LEADING_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_number(text: str) -> int | float | None:
    normalized = text.strip()
    if not normalized:
        return None

    if normalized.count(".") > 1:
        return None

    if _INTEGER_RE.fullmatch(normalized):
        return int(normalized)

    if _FLOAT_RE.fullmatch(normalized):
        return float(normalized)

    return None


def parse_leading_number(text: str) -> int | float | None:
    """Parse the numeric prefix of `text` (`"10"`, `"2.5x"` -> 2.5).

    Returns None when `text` does not start with a number.
    """
    match = _LEADING_NUMBER_RE.match(text.strip())
    if match is None:
        return None
    return parse_number(match.group(0))
