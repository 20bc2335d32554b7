"""Decode the numbers of one coordinate into signed decimal degrees.

Several numbers are read at face value as degrees, minutes, seconds and
milliseconds of degree. A single number is ambiguous: ``402505.994`` is not
40 degrees, so its magnitude decides how it was packed. No latitude or
longitude exceeds 360 degrees, which gives the thresholds below:

=====================  ==========================  ====================
single number          read as                     example
=====================  ==========================  ====================
``> 909090``           milliseconds of degree      ``145505994.48``
``> 9090``             DDDMMSS (fraction dropped)  ``402505.994``
``> 360``              DDDMM.mm                    ``4025.0999``
otherwise              decimal degrees             ``40.4183318``
=====================  ==========================  ====================
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from coordparse.core.exceptions import CoordinateNumberError
from coordparse.core.types import CoordinateNumber
from coordparse.models.coordinate import CoordinateComponent, CoordinateFormat

logger = logging.getLogger(__name__)

MILLISECONDS_THRESHOLD = 909090
PACKED_DMS_THRESHOLD = 9090
PACKED_DM_THRESHOLD = 360

_FACE_VALUE_FORMATS = {
    1: CoordinateFormat.DEGREES,
    2: CoordinateFormat.DEGREES_MINUTES,
    3: CoordinateFormat.DEGREES_MINUTES_SECONDS,
    4: CoordinateFormat.DEGREES_MINUTES_SECONDS,
}


def _magnitude(numbers: Sequence[CoordinateNumber], index: int) -> float:
    return abs(float(numbers[index])) if len(numbers) > index else 0.0


def detect_format(numbers: Sequence[CoordinateNumber]) -> CoordinateFormat:
    """Which encoding ``numbers`` are decoded as.

    Only a lone number is reinterpreted; thresholds are strict and checked from
    the largest down.
    """
    if not numbers:
        raise CoordinateNumberError("coordinate number is too small")
    if len(numbers) > 1:
        return _FACE_VALUE_FORMATS[min(len(numbers), 4)]

    degrees = _magnitude(numbers, 0)
    if degrees > MILLISECONDS_THRESHOLD:
        return CoordinateFormat.MILLISECONDS
    if degrees > PACKED_DMS_THRESHOLD:
        return CoordinateFormat.PACKED_DEGREES_MINUTES_SECONDS
    if degrees > PACKED_DM_THRESHOLD:
        return CoordinateFormat.PACKED_DEGREES_MINUTES
    return CoordinateFormat.DEGREES


def resolve_component(numbers: Sequence[CoordinateNumber]) -> CoordinateComponent:
    """Build the decoded component for up to four numbers of one coordinate."""
    coordinate_format = detect_format(numbers)

    raw_degrees = float(numbers[0])
    sign = 1 if raw_degrees >= 0 else -1
    degrees = abs(raw_degrees)
    minutes = _magnitude(numbers, 1)
    seconds = _magnitude(numbers, 2)
    subsecond = _magnitude(numbers, 3)

    if coordinate_format is CoordinateFormat.MILLISECONDS:
        subsecond = degrees
        degrees = 0.0
    elif coordinate_format is CoordinateFormat.PACKED_DEGREES_MINUTES_SECONDS:
        packed_degrees = math.floor(degrees / 10000)
        minutes = math.floor((degrees - packed_degrees * 10000) / 100)
        seconds = math.floor(degrees - packed_degrees * 10000 - minutes * 100)
        degrees = packed_degrees
    elif coordinate_format is CoordinateFormat.PACKED_DEGREES_MINUTES:
        packed_degrees = math.floor(degrees / 100)
        minutes = degrees - packed_degrees * 100
        degrees = packed_degrees

    if coordinate_format not in _FACE_VALUE_FORMATS.values():
        logger.debug("Read %s as %s", numbers[0], coordinate_format)

    return CoordinateComponent(
        sign=sign,
        degrees=degrees,
        minutes=minutes,
        seconds=seconds,
        subsecond=subsecond,
        format=coordinate_format,
    )


def coordinate_numbers_to_decimal(numbers: Sequence[CoordinateNumber]) -> float:
    return resolve_component(numbers).to_decimal()
