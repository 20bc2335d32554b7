"""Request/response bodies for the HTTP surface."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from coordparse.models.coordinate import ParseResult


class CoordinateRequest(BaseModel):
    """A single coordinate string to parse or validate."""

    coordinates: str

    model_config = {"str_strip_whitespace": True}


class ParseResponse(ParseResult):
    """ParseResult plus normalized renderings of the parsed point."""

    decimal: Optional[str] = None
    dms: Optional[str] = None
