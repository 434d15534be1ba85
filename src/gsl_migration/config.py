"""
Application settings loaded from environment variables.

Uses pydantic-settings so every field can be overridden with a ``GSL_``
prefixed environment variable or a ``.env`` file, e.g.::

    GSL_DATA_DIR=/srv/birds GSL_TICK_INTERVAL=0.1 gsl-migration replay
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ─── Core ──────────────────────────────────────────────────────
    app_name: str = "gsl-migration"
    app_env: str = "development"
    debug: bool = False

    # ─── Data ──────────────────────────────────────────────────────
    # Static inputs live under data_dir. When data_url is set, datasets
    # are fetched from that base URL instead (same relative layout).
    data_dir: Path = Path("data")
    data_url: str | None = None
    site_dir: Path = Path("site")
    api_port: int = 8000

    # ─── Animation ─────────────────────────────────────────────────
    start_year: int = 2004
    end_year: int = 2023
    step_months: int = Field(default=2, ge=1)
    tick_interval: float = Field(default=0.05, ge=0)

    # ─── Charts ────────────────────────────────────────────────────
    smoothing_window: int = Field(default=30, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="GSL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached after first call)."""
    return Settings()
