"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

router = APIRouter(tags=["health"])

REFERENCE_COORDINATES = "40.4183318° N 74.6411133° W"


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(request: Request) -> dict[str, str]:
    result = request.app.state.parser.parse(REFERENCE_COORDINATES)
    if not result.success:
        raise HTTPException(status_code=503, detail=result.message)
    return {"status": "ready"}
