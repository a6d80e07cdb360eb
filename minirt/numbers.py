"""Strict number parsing for scene file fields."""

from __future__ import annotations

import re

INT_MIN = -2147483648
INT_MAX = 2147483647

_INT_RE = re.compile(r"[+-]?[0-9]*", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?[0-9.]*", re.ASCII)


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer; raise ValueError if malformed."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    digits = text.lstrip("+-") if text[:1] in "+-" else text
    negative = text.startswith("-")
    value = int(digits) if digits else 0
    if negative:
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_float(text: str) -> float:
    """Parse a decimal number with at most one dot, not ending in a dot."""
    if (
        not text
        or not _FLOAT_RE.fullmatch(text)
        or text.count(".") > 1
        or text.endswith(".")
    ):
        raise ValueError(f"not a number: {text!r}")
    body = text[1:] if text[0] in "+-" else text
    value = float(body) if body else 0.0
    return -value if text.startswith("-") else value