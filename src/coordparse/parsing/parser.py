"""Coordinate string to (latitude, longitude) orchestration."""

from __future__ import annotations

import logging

from coordparse.core.exceptions import CoordinateNumberError, InvalidCoordinateError
from coordparse.models.coordinate import ParseResult, ValidationResult
from coordparse.parsing.extractor import extract_coordinate_numbers
from coordparse.parsing.resolver import coordinate_numbers_to_decimal
from coordparse.parsing.validator import CoordinateValidator

logger = logging.getLogger(__name__)


def latitude_is_negative(coordinates: str) -> bool:
    return "s" in coordinates or "S" in coordinates


def longitude_is_negative(coordinates: str) -> bool:
    return "w" in coordinates or "W" in coordinates


class CoordinateParser:
    """Parses free-form coordinate strings into signed decimal degrees.

    Numbers are split evenly by position: the first half is the latitude, the
    second half the longitude. A hemisphere letter anywhere in the string
    (``S`` for latitude, ``W`` for longitude) multiplies the decoded value by -1
    once, on top of any leading minus sign.
    """

    def is_valid(self, coordinates: str) -> ValidationResult:
        return CoordinateValidator.is_valid(coordinates)

    def parse_or_raise(self, coordinates: str) -> ParseResult:
        """Parse ``coordinates`` or raise ``InvalidCoordinateError``."""
        CoordinateValidator.check(coordinates)

        numbers = extract_coordinate_numbers(coordinates)
        count_each = len(numbers) // 2
        latitude_numbers = numbers[:count_each]
        longitude_numbers = numbers[count_each:]

        try:
            latitude = coordinate_numbers_to_decimal(latitude_numbers)
            longitude = coordinate_numbers_to_decimal(longitude_numbers)
        except CoordinateNumberError as exc:
            raise InvalidCoordinateError(coordinates, str(exc)) from exc

        if latitude_is_negative(coordinates):
            latitude *= -1
        if longitude_is_negative(coordinates):
            longitude *= -1

        return ParseResult(success=True, latitude=latitude, longitude=longitude)

    def parse(self, coordinates: str) -> ParseResult:
        """Parse ``coordinates``; failures come back as an unsuccessful result."""
        try:
            return self.parse_or_raise(coordinates)
        except InvalidCoordinateError as exc:
            logger.debug("Could not parse %r: %s", coordinates, exc.reason)
            return ParseResult(success=False, message=exc.reason)

