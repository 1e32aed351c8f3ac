"""Configuration module for KeyMover."""

from .manager import ConfigManager, get_config, get_config_manager
from .models import KeyMoverConfig, LoggingSettings, MoverSettings

__all__ = [
    "KeyMoverConfig",
    "MoverSettings",
    "LoggingSettings",
    "ConfigManager",
    "get_config",
    "get_config_manager",
]
