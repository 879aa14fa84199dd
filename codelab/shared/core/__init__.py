"""
Shared Core Module
==================

Configuration.
"""

from .configuration import (
    ConfigManager,
    GreetingsConfig,
    SystemConfig,
    UIConfig,
    ValidationLevel,
    get_config,
    get_config_manager,
)

__all__ = [
    "ConfigManager",
    "GreetingsConfig",
    "SystemConfig",
    "UIConfig",
    "ValidationLevel",
    "get_config",
    "get_config_manager",
]
