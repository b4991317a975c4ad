"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgjsx_env: str = "development"
    svgjsx_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Limits
    max_content_size: int = 1024 * 1024
    batch_max_items: int = 50

    # Optimization
    sanitize_by_default: bool = True
    cache_max_entries: int = 1000
    minify_precision: int = 3

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
