"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Encoder CLI
    output_format: Literal["text", "csv", "json"] = Field(
        "text", description="Default output format of the encode tool"
    )
    font_name: str = Field(
        "JANCODE-nicWabun", description="Barcode font the glyph strings are meant for"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
