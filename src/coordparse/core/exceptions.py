"""coordparse exception hierarchy."""

from __future__ import annotations


class CoordParseError(Exception):
    """Base exception for all coordparse errors."""


class InvalidCoordinateError(CoordParseError):
    """Coordinate string rejected by validation."""

    def __init__(self, coordinates: str, reason: str) -> None:
        self.coordinates = coordinates
        self.reason = reason
        super().__init__(f"Invalid coordinate {coordinates!r}: {reason}")


class CoordinateNumberError(CoordParseError):
    """Not enough numbers to build a coordinate component."""
