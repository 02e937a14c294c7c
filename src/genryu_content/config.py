# -*- coding: utf-8 -*-
"""
Content service configuration using Pydantic BaseSettings.
"""
from typing import List, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central service configuration loaded from environment variables.
    Pydantic's BaseSettings provides automatic validation, type casting,
    and reading from .env files.
    """

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8002

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # ==========================================================================
    # Strapi CMS
    # ==========================================================================

    # Base URL of the CMS, without trailing slash (stripped if present)
    STRAPI_URL: str = "http://localhost:1337"

    # Request timeout in seconds
    STRAPI_TIMEOUT: float = 10.0

    # Image shown when an article has no cover or hero image
    PLACEHOLDER_IMAGE: str = "/images/placeholder.jpg"

    # Page sizes
    DEFAULT_PAGE_SIZE: int = 50
    CATEGORY_PAGE_SIZE: int = 100
    GLIMPSE_PAGE_SIZE: int = 10

    # Home page category glimpses
    GLIMPSE_CATEGORIES: List[str] = ["culture", "language", "food", "society", "art", "travel"]
    GLIMPSE_ARTICLE_LIMIT: int = 2

    # Excerpt length (characters, before the ellipsis)
    EXCERPT_LENGTH: int = 160

    # API Documentation (disable in production)
    DOCS_ENABLED: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = False

    # Request tracking
    REQUEST_ID_HEADER: str = "X-Request-ID"

    # Compression
    GZIP_MIN_SIZE: int = 1000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @field_validator("STRAPI_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


# Global configuration instance
settings = Settings()
