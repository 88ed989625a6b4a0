"""
Environment-driven settings for the HTTP service.

Read on every call so tests can flip variables with ``monkeypatch.setenv``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ServiceSettings:
    api_title: str = "Restaurant Valuation API"
    log_level: str = "INFO"
    # Reject invalid inputs with 400 instead of returning results with warnings.
    strict_validation: bool = False
    host: str = "127.0.0.1"
    port: int = 8000


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def get_settings() -> ServiceSettings:
    return ServiceSettings(
        api_title=os.environ.get("RESTAURANT_VALUATION_API_TITLE", "Restaurant Valuation API"),
        log_level=os.environ.get("RESTAURANT_VALUATION_LOG_LEVEL", "INFO").upper(),
        strict_validation=_env_flag("RESTAURANT_VALUATION_STRICT_VALIDATION"),
        host=os.environ.get("RESTAURANT_VALUATION_HOST", "127.0.0.1"),
        port=int(os.environ.get("RESTAURANT_VALUATION_PORT", "8000")),
    )
