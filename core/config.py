"""Application settings.

Values are read from the environment (and an optional `.env` file) through
pydantic-settings. External clients receive the settings object at
construction time instead of reading the environment themselves.
"""

from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the plan service."""

    # Generative backend
    GEMINI_API_KEY: str = Field(
        "",
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY", "GOOGLE_API_KEY"),
    )
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GENERATION_TIMEOUT_SECONDS: float = 60.0

    # Identity provider and object storage
    SUPABASE_URL: str = ""
    SUPABASE_SERVICE_ROLE_KEY: str = ""
    PROGRESS_PHOTO_BUCKET: str = "progress-photos"
    PROVIDER_TIMEOUT_SECONDS: float = 15.0

    # Storage for profiles, plans and logs
    DATABASE_URL: str = "sqlite:///nutristrong.db"
    READ_DATABASE_URL: str = ""

    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
