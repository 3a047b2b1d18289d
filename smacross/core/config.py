"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "SMA Crossover Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (Frontend URL)
    allowed_origins: list[str] = ["http://localhost:3000"]

    # Alpha Vantage
    alpha_vantage_api_key: Optional[str] = None
    alpha_vantage_base_url: str = "https://www.alphavantage.co/query"

    # Polygon.io
    polygon_api_key: Optional[str] = None
    polygon_base_url: str = "https://api.polygon.io"

    # History fetched per request (calendar days)
    history_lookback_days: int = 730
    fetch_timeout_seconds: float = 30.0

    # Analysis defaults (shown by the settings form)
    default_short_period: int = 190
    default_long_period: int = 212
    default_window_days: int = 365

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
