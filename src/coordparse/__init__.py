"""Parse free-form latitude/longitude strings into signed decimal degrees.

    >>> import coordparse
    >>> result = coordparse.parse("40.4183318° N 74.6411133° W")
    >>> result.latitude, result.longitude
    (40.4183318, -74.6411133)
"""

from __future__ import annotations

from coordparse.core.exceptions import (
    CoordinateNumberError,
    CoordParseError,
    InvalidCoordinateError,
)
from coordparse.formatting import format_decimal, format_dms
from coordparse.models.coordinate import (
    CoordinateComponent,
    CoordinateFormat,
    ParseResult,
    ValidationResult,
)
from coordparse.parsing.parser import CoordinateParser

_default_parser = CoordinateParser()


def parse(coordinates: str) -> ParseResult:
    return _default_parser.parse(coordinates)


def parse_or_raise(coordinates: str) -> ParseResult:
    return _default_parser.parse_or_raise(coordinates)


def is_valid(coordinates: str) -> ValidationResult:
    return _default_parser.is_valid(coordinates)


__all__ = [
    "CoordParseError",
    "CoordinateComponent",
    "CoordinateFormat",
    "CoordinateNumberError",
    "CoordinateParser",
    "InvalidCoordinateError",
    "ParseResult",
    "ValidationResult",
    "format_decimal",
    "format_dms",
    "is_valid",
    "parse",
    "parse_or_raise",
]
