"""Common configuration management for fencat."""

from .display_config import (
    ConfigError,
    DisplayConfig,
    DisplayConfigManager,
    init_display_config,
    get_display_config
)

__all__ = [
    'ConfigError', 'DisplayConfig', 'DisplayConfigManager', 'init_display_config', 'get_display_config'
]
