"""Application settings.

Values are read from ``GRENLOC_*`` environment variables (or a ``.env`` file)
and fall back to the defaults below.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for GrenLoc."""

    model_config = SettingsConfigDict(
        env_prefix="GRENLOC_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "GrenLoc"
    app_env: str = "development"
    debug: bool = False

    # 'geojson' is reserved for polygon boundaries; it currently falls back to 'bbox'
    boundary_mode: Literal["bbox", "geojson"] = "bbox"

    maps_search_url: str = "https://www.google.com/maps/search/?api=1&query={lat},{lng}"

    geocoder_url: str = "https://nominatim.openstreetmap.org/search"
    geocoder_timeout: float = Field(default=15.0, gt=0)

    sticker_dir: Path = Path("stickers")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
