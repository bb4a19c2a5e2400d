"""FastAPI dependency injection."""

from __future__ import annotations

from svgeo.config import Settings, settings


def get_settings() -> Settings:
    return settings
