"""Shared fixtures and reference coordinates."""

from __future__ import annotations

import pytest

from coordparse.parsing.parser import CoordinateParser

# 40.4183318 N, 74.6411133 W written in every notation the parser accepts
REFERENCE_LATITUDE = 40.4183318
REFERENCE_LONGITUDE = -74.6411133
TOLERANCE = 0.001

NORTH_WEST_FORMATS = [
    "40.4183318, -74.6411133",
    "40.4183318° N 74.6411133° W",
    "40° 25´ 5.994\" N 74° 38´ 28.008\" W",
    "40° 25.0999’ , -74° 38.4668’",
    "N40°25’5.994, W74°38’28.008\"",
    "40°25’5.994\"N, 74°38’28.008\"W",
    "40 25 5.994, -74 38 28.008",
    "40.4183318 -74.6411133",
    "40.4183318°,-74.6411133°",
    "40-25.0999N 74-38.4668W",
    "145505994.48, -268708007.88",
    "40.4183318N74.6411133W",
    "4025.0999N7438.4668W",
    "402505.994N743828.008W",
    "N 40 25.0999    W 74 38.4668",
    "40:25:6N,74:38:28W",
    "40:25:5.994N 74:38:28.008W",
    "40°25’6\"N 74°38’28\"W",
    "40°25’6\" -74°38’28\"",
    "40d 25’ 6\" N 74d 38’ 28\" W",
    "40.4183318N 74.6411133W",
    "40° 25.0999, -74° 38.4668",
    "40.4183318n 74.6411133w",
]

SOUTH_EAST_FORMATS = [
    "-40.4183318, 74.6411133",
    "40.4183318° S 74.6411133° E",
    "40° 25´ 5.994\" S 74° 38´ 28.008\" E",
    "-40° 25.0999’ , 74° 38.4668’",
    "S40°25’5.994, E74°38’28.008\"",
    "40°25’5.994\"S, 74°38’28.008\"E",
    "-40 25 5.994, 74 38 28.008",
    "-40.4183318 74.6411133",
    "-40.4183318°,74.6411133°",
    "40-25.0999S 74-38.4668E",
    "-145505994.48, 268708007.88",
    "40.4183318S74.6411133E",
    "4025.0999S7438.4668E",
    "402505.994S743828.008E",
    "S 40 25.0999    E 74 38.4668",
    "40:25:6S,74:38:28E",
    "40:25:5.994S 74:38:28.008E",
    "40°25’6\"S 74°38’28\"E",
    "-40°25’6\" 74°38’28\"",
    "40d 25’ 6\" S 74d 38’ 28\" E",
    "40.4183318S 74.6411133E",
    "40.4183318S 74.6411133",
    "-40° 25.0999, 74° 38.4668",
]

INVALID_FORMATS = [
    "blablabla",
    "5 Fantasy street 12",
    "-40.1X, 74",
    "-40.1 X, 74",
    "-40.1, 74X",
    "-40.1, 74 X",
    "1 2 3 4 5 6 7 8",
    "1 2 3 4 5 6 7",
    "1 2 3 4 5",
    "1 2 3 ",
    "1",
    "",
    "40.1° SS 60.1° EE",
    "40.1° E 60.1° S",
    "40.1° W 60.1° N",
    "40.1° W 60.1° W",
    "40.1° N 60.1° N",
    "-40.4183318, 12.345, 74.6411133",
]


@pytest.fixture
def parser() -> CoordinateParser:
    return CoordinateParser()
