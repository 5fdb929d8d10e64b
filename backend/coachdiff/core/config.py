"""Configuration settings for coachdiff."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .enums import RANKED_SOLO_QUEUE_ID, Tier

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from COACHDIFF_* environment variables."""

    # Logging
    log_level: str = Field(default="INFO")
    json_logs: bool = Field(default=True)

    # Match selection
    ranked_solo_queue_id: int = Field(
        default=RANKED_SOLO_QUEUE_ID,
        description="Match-V5 queue id kept for analysis (420 = Ranked Solo/Duo)",
    )
    match_window: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Number of most recent matches used to build a profile",
    )

    # Benchmarks
    benchmark_file: Optional[Path] = Field(
        default=None,
        description="JSON file overriding the bundled benchmark table",
    )
    unranked_tier: Tier = Field(
        default=Tier.SILVER,
        description="Tier used as the baseline for players without a solo queue rank",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept only level names known to the logging module."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="COACHDIFF_",
        case_sensitive=False,
        extra="forbid",
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
