"""
Configuration module - loads settings from .env file
"""
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0")  # All interfaces, platforms assign PORT
    port: int = Field(default=3000)
    log_level: str = Field(default="INFO")
    cors_origins: List[str] = Field(default=["*"])

    # HTTP fetch
    request_timeout_seconds: int = Field(default=20)
    max_redirects: int = Field(default=5)
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        )
    )

    # === Browser Service ===
    browser_timeout_ms: int = Field(default=30000)
    browser_settle_ms: int = Field(default=3000)
    browser_block_resources: bool = Field(default=True)

    # === Extraction ===
    currency_symbols: str = Field(default="£")  # Each character is a symbol
    currency_suffix_enabled: bool = Field(default=False)  # Also match "10.95£"
    max_items: int = Field(default=100, ge=1, le=100)
    fallback_min_chars: int = Field(default=3)
    fallback_max_chars: int = Field(default=150)


settings = Settings()
