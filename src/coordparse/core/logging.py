"""Logging setup for the coordparse package logger."""

from __future__ import annotations

import logging

from coordparse.core.config import AppSettings

PACKAGE_LOGGER = "coordparse"


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Safe to call repeatedly: the handler is installed once and only the level
    and format are refreshed on later calls.
    """
    if settings is None:
        settings = AppSettings()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    formatter = logging.Formatter(settings.log_format)
    handler = next(
        (h for h in logger.handlers if getattr(h, "_coordparse_handler", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._coordparse_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    handler.setFormatter(formatter)
    return logger
