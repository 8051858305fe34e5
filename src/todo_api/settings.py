from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - APP_ENV: 'development' (default), 'production' or 'test'
    - HOST / PORT: bind address for `python -m todo_api`. Default 0.0.0.0:3001
    - PERSISTENCE_BACKEND: 'json' (default) or 'memory'
    - DATA_FILE_PATH: path to the JSON store file. Default './data/todos.json'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins or '*'
    - OPENWEATHERMAP_API_KEY: weather provider key; empty means mock weather
    - OPENWEATHERMAP_BASE_URL: weather provider base URL
    - WEATHER_DEFAULT_CITY: city used when a weather query names none
    - LOG_LEVEL: debug, info (default), warning or error
    - LOG_FORMAT: 'pretty' or 'json'; defaults to 'json' in production
    """

    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3001
    persistence_backend: str = "json"
    data_file_path: str = "./data/todos.json"
    cors_allow_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    weather_api_key: str = ""
    weather_base_url: str = "https://api.openweathermap.org/data/2.5"
    weather_default_city: str = "Kaduna"
    log_level: str = "info"
    log_format: str = "pretty"


_APP_ENVS = {"development", "production", "test"}
_BACKENDS = {"memory", "json"}
_LOG_LEVELS = {"debug", "info", "warning", "error"}


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be a number") from e


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
    if app_env not in _APP_ENVS:
        raise ValueError(
            f"Invalid APP_ENV: {app_env}. Must be development, production, or test"
        )

    backend = _get_env("PERSISTENCE_BACKEND", "json").strip().lower()
    if backend not in _BACKENDS:
        # Fallback to memory if unsupported
        backend = "memory"

    log_level = _get_env("LOG_LEVEL", "info").strip().lower()
    if log_level not in _LOG_LEVELS:
        log_level = "info"
    default_format = "json" if app_env == "production" else "pretty"
    log_format = _get_env("LOG_FORMAT", default_format).strip().lower()
    if log_format not in {"pretty", "json"}:
        log_format = default_format

    return Settings(
        app_env=app_env,
        host=_get_env("HOST", "0.0.0.0").strip(),
        port=_get_env_int("PORT", 3001),
        persistence_backend=backend,
        data_file_path=_get_env("DATA_FILE_PATH", "./data/todos.json").strip(),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "http://localhost:3000")),
        weather_api_key=os.getenv("OPENWEATHERMAP_API_KEY", "").strip(),
        weather_base_url=_get_env(
            "OPENWEATHERMAP_BASE_URL", "https://api.openweathermap.org/data/2.5"
        ).strip().rstrip("/"),
        weather_default_city=_get_env("WEATHER_DEFAULT_CITY", "Kaduna").strip(),
        log_level=log_level,
        log_format=log_format,
    )
