"""Render decimal-degree pairs back into strings the parser accepts."""

from __future__ import annotations


def format_decimal(latitude: float, longitude: float, places: int = 7) -> str:
    """Fixed-point ``"lat, lon"``.

    Never uses exponent notation: ``1e-05`` would be read back as two numbers.
    """
    return f"{latitude:.{places}f}, {longitude:.{places}f}"


def _dms(value: float, positive: str, negative: str, places: int) -> str:
    direction = positive if value >= 0 else negative
    # round on total seconds so 59.9996" carries into the next minute
    total_seconds = round(abs(value) * 3600, places)
    degrees = int(total_seconds // 3600)
    minutes = int((total_seconds - degrees * 3600) // 60)
    seconds = total_seconds - degrees * 3600 - minutes * 60
    return f"{degrees}°{minutes}'{seconds:.{places}f}\"{direction}"


def format_dms(latitude: float, longitude: float, places: int = 3) -> str:
    """Degrees/minutes/seconds with hemisphere letters.

    Example: ``40°25'5.994"N, 74°38'28.008"W``.
    """
    lat_dms = _dms(latitude, "N", "S", places)
    lon_dms = _dms(longitude, "E", "W", places)
    return f"{lat_dms}, {lon_dms}"
