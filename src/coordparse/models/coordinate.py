"""Coordinate value models: decoded components and parse/validation results."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from coordparse.core.types import LatLon
from coordparse.formatting import format_decimal, format_dms


class CoordinateFormat(StrEnum):
    DEGREES = "DEGREES"
    DEGREES_MINUTES = "DEGREES_MINUTES"
    DEGREES_MINUTES_SECONDS = "DEGREES_MINUTES_SECONDS"
    PACKED_DEGREES_MINUTES = "PACKED_DEGREES_MINUTES"  # DDDMM.mm
    PACKED_DEGREES_MINUTES_SECONDS = "PACKED_DEGREES_MINUTES_SECONDS"  # DDDMMSS
    MILLISECONDS = "MILLISECONDS"  # milliseconds of degree


class CoordinateComponent(BaseModel):
    """One decoded half (latitude or longitude) of a coordinate string.

    Magnitudes are not range checked: ``minutes`` or ``seconds`` may exceed 60
    when the input says so.
    """

    model_config = {"frozen": True}

    sign: int = 1
    degrees: float = 0.0
    minutes: float = 0.0
    seconds: float = 0.0
    subsecond: float = 0.0  # milliseconds of degree
    format: CoordinateFormat = CoordinateFormat.DEGREES

    def to_decimal(self) -> float:
        return self.sign * (
            self.degrees
            + self.minutes / 60
            + self.seconds / 3600
            + self.subsecond / 3600000
        )


class ValidationResult(BaseModel):
    """Outcome of structural validation; truthy when the string is valid."""

    valid: bool
    message: str = ""

    def __bool__(self) -> bool:
        return self.valid


class ParseResult(BaseModel):
    """Outcome of parsing a coordinate string.

    On failure ``latitude`` and ``longitude`` stay at 0.0 and ``message`` says
    why. On success ``message`` is empty.
    """

    success: bool
    latitude: float = 0.0
    longitude: float = 0.0
    message: str = ""

    def __bool__(self) -> bool:
        return self.success

    @property
    def lat_lon(self) -> LatLon:
        return self.latitude, self.longitude

    def to_decimal_string(self, places: int = 7) -> str:
        """Normalized ``"lat, lon"`` string that parses back to the same pair."""
        return format_decimal(self.latitude, self.longitude, places=places)

    def to_dms_string(self, places: int = 3) -> str:
        return format_dms(self.latitude, self.longitude, places=places)
