"""Application configuration using Pydantic settings."""
from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    app_name: str = "Resume Roast API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS Settings
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5000",
        "http://localhost:5173",
    ]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    # Input limits
    min_text_length: int = 50
    max_text_length: int = 20000
    max_file_size_mb: int = 10
    min_extracted_chars: int = 100
    preview_chars: int = 800

    # Rate Limiting
    rate_limit_enabled: bool = True
    rate_limit_requests: int = 20
    rate_limit_period: int = 3600  # seconds

    # Redis store for rate-limit counters
    redis_url: str | None = None
    redis_tls: bool = False

    class Config:
        env_prefix = "RESUMEROAST_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
