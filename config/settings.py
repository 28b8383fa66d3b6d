"""
Application settings loaded from environment variables.

Uses pydantic-settings for validation and type safety.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings.

    All values loaded from .env file or environment variables.
    Validation happens automatically on startup.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),  # Check current dir, then parent
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ===================
    # SUPABASE
    # ===================
    supabase_url: str = Field(
        ...,
        description="Supabase project URL"
    )
    supabase_key: str = Field(
        ...,
        description="Supabase anon/public key"
    )

    # ===================
    # GOOGLE CUSTOM SEARCH
    # ===================
    google_search_api_key: Optional[str] = Field(
        None,
        description="Google Custom Search API key (bag dimension lookup)"
    )
    google_search_engine_id: Optional[str] = Field(
        None,
        description="Google Programmable Search engine ID"
    )
    google_search_timeout_seconds: int = Field(
        default=10,
        ge=1,
        le=60,
        description="Timeout for Google Custom Search requests"
    )

    # ===================
    # AIRLINE REFERENCE DATA
    # ===================
    seed_airlines_on_startup: bool = Field(
        default=True,
        description="Insert reference airlines on startup when the table is empty"
    )
    airline_cache_seconds: int = Field(
        default=300,
        ge=0,
        le=86400,
        description="Cache-Control max-age for the airline reference list"
    )
    default_unit: str = Field(
        default="in",
        pattern="^(in|cm)$",
        description="Display unit for new users"
    )

    # ===================
    # APP SETTINGS
    # ===================
    environment: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level"
    )
    api_host: str = Field(
        default="0.0.0.0",
        description="API host"
    )
    api_port: int = Field(
        default=8000,
        ge=1000,
        le=65535,
        description="API port"
    )
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        description="Allowed CORS origins for the web client"
    )

    # ===================
    # COMPUTED PROPERTIES
    # ===================
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def google_search_configured(self) -> bool:
        """Check if Google Custom Search is properly configured."""
        return bool(self.google_search_api_key and self.google_search_engine_id)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.

    Returns:
        Settings: Application settings

    Raises:
        ValidationError: If required env vars are missing or invalid
    """
    return Settings()


# For convenient imports: from config.settings import settings
settings = get_settings()
