"""Extraction of the numeric tokens found in a coordinate string."""

from __future__ import annotations

import re

from coordparse.core.types import CoordinateNumber

# optional minus, digits, optional fraction; ASCII digits only
COORDINATE_NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


def extract_coordinate_numbers(coordinates: str) -> list[CoordinateNumber]:
    """Return every number in ``coordinates``, verbatim and left to right.

    Matches never overlap; each search resumes where the previous match ended,
    so ``"40-25.0999"`` yields ``["40", "-25.0999"]``.
    """
    return [match.group(0) for match in COORDINATE_NUMBER_RE.finditer(coordinates)]
