"""
Configuration settings using Pydantic Settings.
"""

from pathlib import Path
from pydantic import model_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

import os

BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    BACKBOARD_API_KEY: str = os.environ.get("BACKBOARD_API_KEY") or ""
    BACKBOARD_API_BASE_URL: str = "https://app.backboard.io/api"
    BACKBOARD_MAX_RETRIES: int = 2
    BACKBOARD_RETRY_BASE_SECONDS: float = 0.5
    BACKBOARD_RETRY_MAX_SECONDS: float = 4.0

    REGION_LOOKUP_URL: str = "http://localhost:8000/api/region-lookup"
    AI_TIMEOUT_SECONDS: float = 12.0
    PERIOD_AI_TIMEOUT_SECONDS: float = 10.0
    AI_CACHE_TTL_DAYS: int = 30

    RATE_LIMIT_REQUESTS: int = 10
    RATE_LIMIT_WINDOW_SECONDS: int = 60
    LOOKUP_INPUT_MAX_CHARS: int = 100
    LOOKUP_MAX_COUNTRIES: int = 50
    LOOKUP_TIMEFRAME_MAX_CHARS: int = 100
    LOOKUP_DESCRIPTION_MAX_CHARS: int = 300

    DATABASE_PATH: str = "database/region_atlas.db"

    LLM_PROVIDER: str = "anthropic"
    MODEL_NAME: str = "claude-sonnet-4-5-20250929"

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    DEBUG: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }

    @model_validator(mode="after")
    def resolve_relative_paths(self):
        db_path = Path(self.DATABASE_PATH)
        if not db_path.is_absolute():
            self.DATABASE_PATH = str((BASE_DIR / db_path).resolve())

        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    :return: Cached Settings instance
    :rtype: Settings
    """
    return Settings()


settings = get_settings()
