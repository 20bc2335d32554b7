"""Parse and validate endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from coordparse.core.config import AppSettings
from coordparse.core.exceptions import InvalidCoordinateError
from coordparse.core.protocols import ICoordinateParser
from coordparse.models.api import CoordinateRequest, ParseResponse
from coordparse.models.coordinate import ValidationResult

router = APIRouter(tags=["coordinates"])


def get_parser(request: Request) -> ICoordinateParser:
    return request.app.state.parser


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def _check_length(body: CoordinateRequest, settings: AppSettings) -> None:
    limit = settings.api.max_input_length
    if len(body.coordinates) > limit:
        raise HTTPException(
            status_code=422,
            detail=f"Coordinate string longer than {limit} characters",
        )


@router.post("/parse", response_model=ParseResponse)
async def parse(
    body: CoordinateRequest,
    parser: ICoordinateParser = Depends(get_parser),
    settings: AppSettings = Depends(get_settings),
) -> ParseResponse:
    """Parse a coordinate string; 422 with the validation message on failure."""
    _check_length(body, settings)
    try:
        result = parser.parse_or_raise(body.coordinates)
    except InvalidCoordinateError as exc:
        raise HTTPException(status_code=422, detail=exc.reason) from exc

    return ParseResponse(
        **result.model_dump(),
        decimal=result.to_decimal_string(settings.parser.decimal_places),
        dms=result.to_dms_string(settings.parser.dms_seconds_places),
    )


@router.post("/validate", response_model=ValidationResult)
async def validate(
    body: CoordinateRequest,
    parser: ICoordinateParser = Depends(get_parser),
    settings: AppSettings = Depends(get_settings),
) -> ValidationResult:
    _check_length(body, settings)
    return parser.is_valid(body.coordinates)
