"""Configuration settings using Pydantic Settings.

Usage:
    from taproom.config import TaproomSettings

    # Load from environment variables (TAPROOM_*)
    settings = TaproomSettings()

    # Or override with explicit values
    settings = TaproomSettings(lock_registration=False)
"""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class TaproomSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for rosters and library logging.

    Attributes:
        log_level: Level applied to the ``taproom`` logger by configure_logging().
        lock_registration: Guard roster registration with a lock. Only turn
            this off when every roster is used from a single thread.

    Environment Variables:
        TAPROOM_LOG_LEVEL
        TAPROOM_LOCK_REGISTRATION
    """

    model_config = SettingsConfigDict(
        env_prefix="TAPROOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = "WARNING"
    lock_registration: bool = True
