# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.VIRGAS_EMAIL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The instance is frozen: request handlers receive it through a
    dependency and never mutate it.
    """

    # -------------------------------------------------------------------------
    # Resend Configuration
    # -------------------------------------------------------------------------
    # These are required - app won't start without them

    RESEND_API_KEY: str = Field(
        ...,
        description="Resend API key used to authenticate send requests"
    )

    RESEND_EMAIL: str = Field(
        ...,
        description="Sender address, e.g. <hiring@virgas.app>"
    )

    VIRGAS_EMAIL: str = Field(
        ...,
        description="Recipient address for every submission"
    )

    RESEND_API_URL: str = Field(
        default="https://api.resend.com",
        description="Base URL of the Resend HTTP API"
    )

    RESEND_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        le=60,
        description="Timeout for a single send request"
    )

    SENDER_NAME: str = Field(
        default="Virgas Hiring",
        min_length=1,
        description="Display name placed in front of RESEND_EMAIL"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def sender(self) -> str:
        """
        The `from` header sent to Resend.

        Example: "Virgas Hiring <hiring@virgas.app>"
        """
        return f"{self.SENDER_NAME} {self.RESEND_EMAIL}"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
