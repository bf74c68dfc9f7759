"""Public API for errproto configuration."""

from .loader import load_config, load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ErrprotoSettings,
    LoggingSettings,
    StackSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ErrprotoSettings",
    "LoggingSettings",
    "StackSettings",
    "load_config",
    "load_settings",
]
