"""
Configuration Settings

Centralized configuration management using Pydantic and environment variables.
"""
from datetime import date

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values can be overridden in a local .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Seed vendor request settings
    seed_site_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
    seed_site_accept: str = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
    seed_site_accept_language: str = "en-US,en;q=0.5"
    request_timeout_seconds: float = 30.0
    request_delay_seconds: float = 2.0  # Pause before every batch fetch

    # Sowing calendar
    last_frost_date: date = date(2025, 5, 10)

    # Data paths
    records_dir: str = "data/records"

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "json"

    # Application settings
    environment: str = "development"


# Singleton instance
settings = Settings()
