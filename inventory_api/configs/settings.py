"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Inventory API.
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
# Response constants
ITEM_ID_NOT_FOUND = "Item ID not found."
ITEM_NAME_NOT_FOUND = "Item name not found."
ITEM_ID_EXISTS = "Item ID already exists"
ITEM_ID_MISSING = "Item ID does not exist."
ITEM_DELETED = {"Success": "Item deleted!"}


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Inventory API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/inventory.log"
    LOG_LEVEL: str = "INFO"
    PRODUCTION_FRONTEND_URL: str | None = None

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    RELOAD: bool = False

    # Rate limits per operation kind
    RATE_LIMIT_READ: str = "60/minute"
    RATE_LIMIT_WRITE: str = "30/minute"
    RATE_LIMIT_METRICS: str = "5/minute"


settings = Settings()


class LimiterConfig(BaseSettings):
    """Keyword arguments for the slowapi limiter."""

    model_config = SettingsConfigDict(env_prefix="LIMITER_", case_sensitive=False)

    default_limits: list[str] = []
    storage_uri: str = "memory://"
    headers_enabled: bool = True
    strategy: Literal["fixed-window", "moving-window"] = "fixed-window"
    enabled: bool = True
