"""
Gym listings configuration — all environment variables in one place.

Read from environment when a Settings object is built. Tests and the app
factories pass explicit overrides instead of mutating the environment.
"""

from __future__ import annotations

import os
from typing import Any

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


class Settings:
    """Application settings from environment variables."""

    def __init__(self, **overrides: Any) -> None:
        # Application
        self.ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")
        self.LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

        # Upstream listing API (consumed by the web app)
        self.GYMS_API_URL: str = os.environ.get("GYMS_API_URL", "http://localhost:5176/gyms")
        self.GYMS_API_TIMEOUT: float = float(os.environ.get("GYMS_API_TIMEOUT", "10.0"))

        # Middleware
        self.HTTPS_REDIRECT: bool = _env_bool("HTTPS_REDIRECT", False)

        known = vars(self)
        for key, value in overrides.items():
            if key not in known:
                raise TypeError(f"Unknown setting: {key}")
            setattr(self, key, value)

        if self.GYMS_API_TIMEOUT <= 0:
            raise RuntimeError("GYMS_API_TIMEOUT must be a positive number of seconds")

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"


# Singleton instance
settings = Settings()
