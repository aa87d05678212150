"""Cart Service Configuration"""

from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

from .. import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Shopping Cart API"
    version: str = __version__
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None  # e.g. logs/combined.log

    # HTTP
    api_prefix: str = ""  # "/api" serves the cart under /api/cart
    cors_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
