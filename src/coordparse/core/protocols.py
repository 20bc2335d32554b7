"""Protocol interfaces for coordparse abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from coordparse.models.coordinate import ParseResult, ValidationResult


@runtime_checkable
class ICoordinateParser(Protocol):
    """Anything that turns a coordinate string into a ParseResult."""

    def is_valid(self, coordinates: str) -> ValidationResult: ...

    def parse(self, coordinates: str) -> ParseResult: ...

    def parse_or_raise(self, coordinates: str) -> ParseResult: ...
