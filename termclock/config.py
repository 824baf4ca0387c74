"""Runtime configuration — env-driven via pydantic-settings.

Reads from a .env file and TERMCLOCK_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClockSettings(BaseSettings):
    """Clock settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export TERMCLOCK_SMOOTH_HOUR_HAND=true
        export TERMCLOCK_LOG_LEVEL=DEBUG
        export TERMCLOCK_LOG_FILE=/tmp/termclock.log

    Or via .env file::

        TERMCLOCK_TICK_SECONDS=0.5
        TERMCLOCK_ON_GLYPH=#
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TERMCLOCK_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_file: Path | None = None  # stderr when unset

    # Timing
    tick_seconds: float = Field(default=1.0, gt=0)

    # Geometry
    radius_percent: int = Field(default=90, ge=1, le=100)
    cell_pitch: int = Field(default=2, ge=1)  # terminal columns per logical x

    # Hands
    smooth_hour_hand: bool = False

    # Appearance
    on_glyph: str = "●"
    off_glyph: str = " "
    glyph_style: str = "bold"
