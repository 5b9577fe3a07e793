# config.py
"""Configuration settings for LightBnB API."""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings."""

    # Database settings
    database_url: str = "lightbnb.duckdb"

    # API settings
    api_title: str = "LightBnB API"
    api_description: str = "API for property listings, users and reservations"
    api_version: str = "1.0.0"

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"

    # Query settings
    default_result_limit: int = 10
    max_result_limit: int = 100
    max_price_per_night: float = 1_000_000  # dollars

    # CORS settings
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8000",
    ]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: List[str] = [
        "Content-Type",
        "Accept",
        "Origin",
    ]
    cors_expose_headers: List[str] = []
    cors_max_age: int = 600  # 10 minutes in seconds

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )

# Create global settings instance
settings = Settings()
