"""Environment driven settings for the forecast client."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_URL = "https://api.open-meteo.com/v1/forecast"


class ImproperlyConfigured(RuntimeError):
    """Raised when the environment holds an unusable value."""


def env(name: str, default: Optional[str] = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


def _optional_float(name: str) -> Optional[float]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ImproperlyConfigured(f"{name} must be a number, got {raw!r}") from exc


def _int(name: str, default: int) -> int:
    raw = env(name, str(default))
    try:
        return int(raw)
    except ValueError as exc:
        raise ImproperlyConfigured(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: Optional[float] = None
    loading_delay_ms: int = 300
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_url=env("FORECAST_API_URL", DEFAULT_API_URL),
            timeout=_optional_float("FORECAST_TIMEOUT"),
            loading_delay_ms=_int("FORECAST_LOADING_DELAY_MS", 300),
            log_level=env("FORECAST_LOG_LEVEL", "INFO").upper(),
        )


__all__ = ["DEFAULT_API_URL", "ImproperlyConfigured", "Settings", "env"]
