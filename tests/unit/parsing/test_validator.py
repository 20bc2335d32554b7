"""Tests for structural validation of coordinate strings."""

from __future__ import annotations

import pytest

from coordparse.core.exceptions import InvalidCoordinateError
from coordparse.parsing.validator import (
    INVALID_CHARACTERS_MESSAGE,
    INVALID_DIRECTION_MESSAGE,
    NO_NUMBERS_MESSAGE,
    TOO_MANY_NUMBERS_MESSAGE,
    UNEVEN_NUMBERS_MESSAGE,
    CoordinateValidator,
)
from tests.conftest import INVALID_FORMATS, NORTH_WEST_FORMATS, SOUTH_EAST_FORMATS


class TestIsValid:
    @pytest.mark.parametrize("coordinates", NORTH_WEST_FORMATS + SOUTH_EAST_FORMATS)
    def test_accepts_known_formats(self, coordinates):
        result = CoordinateValidator.is_valid(coordinates)
        assert result.valid
        assert result.message == ""

    @pytest.mark.parametrize("coordinates", INVALID_FORMATS)
    def test_rejects_malformed_input(self, coordinates):
        result = CoordinateValidator.is_valid(coordinates)
        assert not result
        assert result.message

    def test_result_is_truthy_when_valid(self):
        assert CoordinateValidator.is_valid("40 N 74 W")


class TestMessages:
    @pytest.mark.parametrize(
        "coordinates, message",
        [
            ("blablabla", NO_NUMBERS_MESSAGE),
            ("N E", NO_NUMBERS_MESSAGE),
            ("-40.1X, 74", INVALID_CHARACTERS_MESSAGE),
            ("5 Fantasy street 12", INVALID_CHARACTERS_MESSAGE),
            ("40.1° N 60.1° N", INVALID_DIRECTION_MESSAGE),
            ("40.1° E 60.1° S", INVALID_DIRECTION_MESSAGE),
            ("40.1° SS 60.1° EE", INVALID_DIRECTION_MESSAGE),
            ("1 2 3", UNEVEN_NUMBERS_MESSAGE),
            ("1", UNEVEN_NUMBERS_MESSAGE),
            ("1 2 3 4 5 6 7", TOO_MANY_NUMBERS_MESSAGE),
            ("1 2 3 4 5 6 7 8", TOO_MANY_NUMBERS_MESSAGE),
        ],
    )
    def test_first_failing_check_is_reported(self, coordinates, message):
        assert CoordinateValidator.is_valid(coordinates).message == message

    def test_letter_check_runs_before_direction_check(self):
        assert CoordinateValidator.is_valid("40 N 74 N x").message == INVALID_CHARACTERS_MESSAGE

    def test_degree_letter_is_allowed(self):
        assert CoordinateValidator.is_valid("40d 25 N 74D 38 W").valid

    def test_six_numbers_is_the_maximum(self):
        assert CoordinateValidator.is_valid("1 2 3 4 5 6").valid


class TestCheck:
    def test_raises_with_reason(self):
        with pytest.raises(InvalidCoordinateError) as exc_info:
            CoordinateValidator.check("1 2 3")
        assert exc_info.value.reason == UNEVEN_NUMBERS_MESSAGE
        assert exc_info.value.coordinates == "1 2 3"

    def test_returns_none_when_valid(self):
        assert CoordinateValidator.check("40.1 74.2") is None

    def test_does_not_check_which_half_a_letter_belongs_to(self):
        # N/S before E/W is all that is required
        assert CoordinateValidator.is_valid("N 40.1 74.2 W").valid
        assert CoordinateValidator.is_valid("40.1 74.2 S").valid
