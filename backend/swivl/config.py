"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    swivl_env: str = "development"
    swivl_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:5000"]

    # Model routing
    model_cheap: str = "claude-haiku-4-5-20251001"
    model_mid: str = "claude-sonnet-4-5-20250929"

    # Storage (empty = package data directory)
    swivl_data_dir: str = ""

    # Generation
    default_idea_count: int = 5
    refill_batch_size: int = 3

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
