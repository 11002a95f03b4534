"""Pydantic-based runtime settings for the ads manager.

Loads from ``AD_DISPATCH_*`` environment variables (with optional .env file).
Invalid values fail fast when settings are first loaded.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

Platform = Literal["ios", "tvos", "headless"]


class DispatchSettings(BaseSettings):
    """All configuration for the ads manager, validated at startup."""

    model_config = {"env_prefix": "AD_DISPATCH_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # --- Custom ad rotation ---
    custom_ads_interval: int = Field(
        default=0,
        description="How often a custom ad is mixed in between network interstitials",
    )
    max_custom_ads_per_session: int = Field(
        default=0,
        description="Maximum number of custom ads shown per session",
    )
    custom_ads_file: Path | None = Field(
        default=None,
        description="JSON file with the custom ad inventory",
    )

    # --- Network provider ---
    platform: Platform = Field(
        default="headless",
        description="Platform whose network provider is wired in: 'ios', 'tvos' or 'headless'",
    )
    rewarded_video_ready: bool = Field(
        default=False,
        description="Initial rewarded video readiness for the headless provider",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Log level for the ad_dispatch logger")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> DispatchSettings:
    """Return the singleton DispatchSettings (cached after first call)."""
    return DispatchSettings()
