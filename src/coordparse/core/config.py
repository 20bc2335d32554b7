"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class ParserConfig(BaseSettings):
    """Output formatting for parsed coordinates."""

    model_config = {"env_prefix": "COORDPARSE_PARSER_"}

    decimal_places: int = 7
    dms_seconds_places: int = 3


class ApiConfig(BaseSettings):
    """HTTP surface configuration."""

    model_config = {"env_prefix": "COORDPARSE_API_"}

    title: str = "Coordinate Parser"
    version: str = "0.1.0"
    max_input_length: int = 256


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "COORDPARSE_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    parser: ParserConfig = ParserConfig()
    api: ApiConfig = ApiConfig()
