"""Application configuration using Pydantic Settings.

This module centralizes all configuration values that may vary between environments.
Values can be overridden via environment variables or .env file.
"""
import os
from functools import lru_cache
from typing import Dict, List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load .env before the os.getenv defaults below are evaluated
load_dotenv()


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # ===== App =====
    APP_NAME: str = os.getenv("APP_NAME", "Barber Ratings")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ALLOW_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # ===== Database =====
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")
    DATABASE_HOST: str = os.getenv("DATABASE_HOST", "localhost")
    DATABASE_PORT: int = int(os.getenv("DATABASE_PORT", "3306"))
    DATABASE_USER: str = os.getenv("DATABASE_USER", "root")
    DATABASE_PASSWORD: str = os.getenv("DATABASE_PASSWORD", "")
    DATABASE_NAME: str = os.getenv("DATABASE_NAME", "barber_ratings")

    # Repository implementation: in-memory (default) or SQLAlchemy
    USE_DB_REPOS: bool = os.getenv("USE_DB_REPOS", "false").lower() == "true"

    # ===== Pagination Defaults =====
    DEFAULT_PAGE: int = int(os.getenv("DEFAULT_PAGE", "1"))
    DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
    MAX_PAGE_SIZE: int = int(os.getenv("MAX_PAGE_SIZE", "100"))
    DEFAULT_SORT_FIELD: str = os.getenv("DEFAULT_SORT_FIELD", "created_at")
    DEFAULT_SORT_ORDER: str = os.getenv("DEFAULT_SORT_ORDER", "desc")

    # ===== Validation =====
    REVIEW_TEXT_MAX_LENGTH: int = int(os.getenv("REVIEW_TEXT_MAX_LENGTH", "500"))

    # ===== Authentication =====
    # Development bearer tokens: {"token": {"uid": "...", "phone_number": "..."}}
    DEV_AUTH_TOKENS: Dict[str, Dict[str, str]] = {}
    # Barbers known to the in-memory store: {"barber_id": "name"}
    DEV_BARBERS: Dict[str, str] = {}

    class Config:
        env_file = ".env"
        case_sensitive = True
        # Allow extra fields from .env that aren't defined here
        extra = "ignore"

    @property
    def database_url(self) -> str:
        """Full SQLAlchemy URL, built from the individual parts when not given."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure singleton pattern - settings are loaded once.
    """
    return Settings()


# Global settings instance for easy import
settings = get_settings()
