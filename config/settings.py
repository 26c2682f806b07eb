"""Configuration management using pydantic-settings."""
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Quran.com API configuration
    quran_api_base_url: str = "https://api.quran.com/api/v4"
    api_key: Optional[str] = None

    # Diagnostics
    verbose_mode: bool = False
    log_level: str = "INFO"

    # Cache settings
    cache_ttl_ms: int = 3_600_000  # 1 hour
    cache_max_entries: int = 100

    # Request settings (applies to each attempt, not the whole retry sequence)
    request_timeout_ms: int = 30_000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def cache_ttl_seconds(self) -> float:
        return self.cache_ttl_ms / 1000

    @property
    def request_timeout_seconds(self) -> float:
        return self.request_timeout_ms / 1000


settings = Settings()
