"""
Application settings and configuration.
Uses pydantic-settings for environment variable loading.
"""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(
        default="console",
        description="Log renderer: 'json' or 'console'"
    )

    # Presentation
    default_employer_name: str = Field(
        default="John Doe",
        description="Employer used when none is given on the command line"
    )


# Global settings instance
settings = Settings()
