"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgeo_env: str = "development"
    svgeo_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Reverse conversion defaults used when a request omits them
    default_viewport_width: int = 640
    default_viewport_height: int = 480
    default_point_radius: float = 2.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
