"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from coordparse.api.routes import coordinates, health
from coordparse.core.config import AppSettings
from coordparse.core.logging import configure_logging
from coordparse.parsing.parser import CoordinateParser


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings)
        app.state.settings = settings
        app.state.parser = CoordinateParser()
        yield

    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(coordinates.router)
    return app
