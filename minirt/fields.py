"""Parsing of the comma-separated fields found in scene file lines."""

from __future__ import annotations

from .numbers import parse_float, parse_int
from .scene import Color
from .vectors import Vec

COORDINATE_LIMIT = 1000.0
COLOR_MAX = 255


class ParseError(ValueError):
    """Raised when a field or an element of a scene file is malformed."""


def _components(text: str) -> list[str]:
    """Split on commas, dropping empty parts as consecutive separators collapse."""
    return [part for part in text.split(",") if part]


def parse_color(text: str) -> Color:
    """Parse ``r,g,b`` with each component an integer in 0..255."""
    parts = _components(text)
    if len(parts) != 3:
        raise ParseError("3 color components are needed.")
    try:
        r, g, b = (parse_int(part) for part in parts)
    except ValueError:
        raise ParseError(
            "One of the color components has the wrong data type "
            "or is wrongly formatted."
        ) from None
    if any(not 0 <= value <= COLOR_MAX for value in (r, g, b)):
        raise ParseError("One of the color components is out of range.")
    return Color(r, g, b)


def parse_position(text: str) -> Vec:
    """Parse ``x,y,z`` coordinates, each within -1000..1000."""
    parts = _components(text)
    if len(parts) != 3:
        raise ParseError("3 coordinates are needed.")
    try:
        x, y, z = (parse_float(part) for part in parts)
    except ValueError:
        raise ParseError(
            "One of the coordinates has the wrong data type "
            "or is wrongly formatted."
        ) from None
    if any(abs(value) > COORDINATE_LIMIT for value in (x, y, z)):
        raise ParseError("One of the coordinates is out of the set range.")
    return Vec(x, y, z)


def _is_unit(values: list[float]) -> bool:
    if any(not -1 <= value <= 1 for value in values):
        return False
    total = sum(value * value for value in values)
    return 0.995 <= total <= 1.05


def parse_direction(text: str) -> Vec:
    """Parse a normalised ``x,y,z`` direction vector.

    A malformed component counts as zero for the length check, which is
    made before the format error is reported.
    """
    parts = _components(text)
    if len(parts) != 3:
        raise ParseError("3 vector directions are needed.")
    values: list[float] = []
    malformed = False
    for part in parts:
        try:
            values.append(parse_float(part))
        except ValueError:
            values.append(0.0)
            malformed = True
    if not _is_unit(values):
        raise ParseError("Sum of squared vec directions not equal to 1 or -1")
    if malformed:
        raise ParseError(
            "One of the vector directions has the wrong data type "
            "or is wrongly formatted."
        )
    return Vec(*values)