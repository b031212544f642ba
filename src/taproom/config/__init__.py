"""Configuration module using Pydantic Settings.

Provides typed configuration for the roster and logging with environment
variable support.

Usage:
    from taproom.config import TaproomSettings, configure_logging

    settings = TaproomSettings(log_level="DEBUG")
    configure_logging(settings)
"""

from taproom.config.log import configure_logging
from taproom.config.settings import TaproomSettings

__all__ = [
    "TaproomSettings",
    "configure_logging",
]
