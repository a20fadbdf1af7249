# stock_service/core/config.py

import os
from functools import lru_cache
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Service settings.
    Loads values from environment variables (.env file)
    """
    # Network
    SERVICE_ADDR_STOCK: str = "[::1]:50073"

    # Record store
    DATABASE_URL: str = "sqlite+aiosqlite:///data/stock.db"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Shutdown: max seconds to wait for in-flight calls once draining starts
    SHUTDOWN_GRACE_SECONDS: float = 30.0

    # Environment
    ENVIRONMENT: str = "development"

    model_config = ConfigDict(
        env_file=os.environ.get('ENV_FILE', '.env') if os.path.exists('.env') else None,
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings():
    """Cached settings to avoid reading the environment on every call"""
    return Settings()

def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
