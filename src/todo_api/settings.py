from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - APP_ENV: 'development' (default) or 'production'
    - LOG_LEVEL: DEBUG, INFO (default), WARNING or ERROR
    - LOG_FORMAT: 'console' or 'json'; defaults to 'json' in production
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - HOST: bind address for the bundled runner. Default '0.0.0.0'
    - PORT: bind port for the bundled runner. Default 8000
    """

    app_env: str = "development"
    log_level: str = "INFO"
    log_format: str = "console"
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    host: str = "0.0.0.0"
    port: int = 8000


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_int(value: str, default: int) -> int:
    try:
        return int(value.strip())
    except ValueError:
        return default


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    app_env = _get_env("APP_ENV", "development").strip().lower()
    if app_env not in {"development", "production"}:
        app_env = "development"

    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "INFO"

    default_format = "json" if app_env == "production" else "console"
    log_format = _get_env("LOG_FORMAT", default_format).strip().lower()
    if log_format not in {"console", "json"}:
        log_format = default_format

    return Settings(
        app_env=app_env,
        log_level=log_level,
        log_format=log_format,
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        host=_get_env("HOST", "0.0.0.0").strip(),
        port=_parse_int(_get_env("PORT", "8000"), 8000),
    )
