"""Structural validation of coordinate strings, run before any decoding."""

from __future__ import annotations

import logging
import re

from coordparse.core.exceptions import InvalidCoordinateError
from coordparse.models.coordinate import ValidationResult
from coordparse.parsing.extractor import extract_coordinate_numbers

logger = logging.getLogger(__name__)

MAX_COORDINATE_NUMBERS = 6

NO_NUMBERS_MESSAGE = "Could not find any coordinate number"
INVALID_CHARACTERS_MESSAGE = "Coordinate contains invalid alphanumeric characters."
INVALID_DIRECTION_MESSAGE = "Invalid cardinal direction."
TOO_MANY_NUMBERS_MESSAGE = "Too many coordinate numbers"
UNEVEN_NUMBERS_MESSAGE = "Uneven count of latitude/longitude numbers"

# any letter except hemisphere letters and "d" (degree sign substitute)
_INVALID_LETTER_RE = re.compile(r"(?![neswd])[a-z]", re.IGNORECASE | re.ASCII)
# at most one N/S, optionally followed later by at most one E/W
_ORIENTATION_RE = re.compile(r"[^nsew]*[ns]?[^nsew]*[ew]?[^nsew]*", re.IGNORECASE | re.ASCII)


class CoordinateValidator:
    """Cheap checks that reject clearly malformed input.

    Checks run in a fixed order and stop at the first failure:

    1. the string contains at least one number
    2. no letters other than n, s, e, w, d
    3. hemisphere letters appear as [N|S] ... [E|W], each at most once
    4. no more than six numbers
    5. an even count of numbers, shared equally by latitude and longitude
    """

    @staticmethod
    def check(coordinates: str) -> None:
        """Raise ``InvalidCoordinateError`` for the first failing check."""
        numbers = extract_coordinate_numbers(coordinates)

        if not numbers:
            raise InvalidCoordinateError(coordinates, NO_NUMBERS_MESSAGE)
        if _INVALID_LETTER_RE.search(coordinates):
            raise InvalidCoordinateError(coordinates, INVALID_CHARACTERS_MESSAGE)
        if not _ORIENTATION_RE.fullmatch(coordinates):
            raise InvalidCoordinateError(coordinates, INVALID_DIRECTION_MESSAGE)
        if len(numbers) > MAX_COORDINATE_NUMBERS:
            raise InvalidCoordinateError(coordinates, TOO_MANY_NUMBERS_MESSAGE)
        if len(numbers) % 2:
            raise InvalidCoordinateError(coordinates, UNEVEN_NUMBERS_MESSAGE)

    @classmethod
    def is_valid(cls, coordinates: str) -> ValidationResult:
        try:
            cls.check(coordinates)
        except InvalidCoordinateError as exc:
            logger.debug("Rejected %r: %s", coordinates, exc.reason)
            return ValidationResult(valid=False, message=exc.reason)
        return ValidationResult(valid=True)
