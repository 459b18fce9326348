"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DirectorySettings(BaseSettings):
    """Competition directory settings.

    Environment variables:
        PODIUM_DIRECTORY_SEED_DEMO_DATA: Provision the demo schools, users and
            competitions on startup (default: true)
        PODIUM_DIRECTORY_LOGIN_HEADER: Request header carrying the login
            identifier (default: X-Login-Email)
    """

    model_config = SettingsConfigDict(
        env_prefix="PODIUM_DIRECTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    seed_demo_data: bool = Field(
        default=True,
        description="Seed the in-memory directory with demo data on startup",
    )
    login_header: str = Field(
        default="X-Login-Email",
        description="Header the HTTP layer reads the login identifier from",
    )

    @field_validator("login_header")
    @classmethod
    def validate_login_header(cls, value: str) -> str:
        """Reject blank header names."""
        value = value.strip()
        if not value:
            raise ValueError("login_header must not be empty")
        return value


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="Podium API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def directory(self) -> DirectorySettings:
        """Get competition directory settings."""
        return get_directory_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_directory_settings() -> DirectorySettings:
    """Get cached directory settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DirectorySettings()
