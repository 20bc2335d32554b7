"""Type aliases used across coordparse."""

from __future__ import annotations

CoordinateNumber = str  # one numeric token, verbatim from the input
LatLon = tuple[float, float]
