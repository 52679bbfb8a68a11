"""
Application settings loaded from the environment.

Every field can be set through a ``MAPBOX_``-prefixed environment variable or
a ``.env`` file in the working directory::

    MAPBOX_API_KEY=pk.eyJ...
    MAPBOX_API_VERSION=v1
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.mapbox.com"
DEFAULT_API_VERSION = "v1"


class Settings(BaseSettings):
    """Client defaults. Explicit ``Client`` arguments always win over these."""

    model_config = SettingsConfigDict(
        env_prefix="MAPBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "mapbox-client"
    api_key: str = Field(default="", description="Default access token")
    api_version: str = DEFAULT_API_VERSION
    base_url: str = DEFAULT_BASE_URL
    # seconds; None waits forever
    timeout: Annotated[float, Field(gt=0)] | None = None


@lru_cache
def get_settings() -> Settings:
    """
    Settings for this process.

    Read from the environment on first call and reused for the lifetime of the
    process. Call ``get_settings.cache_clear()`` to force a re-read.
    """
    return Settings()
