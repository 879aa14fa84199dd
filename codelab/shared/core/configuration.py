"""
Configuration Management System for the Basics Codelab

This module provides a centralized configuration system that supports a 3-tier
precedence hierarchy: environment → user → system defaults.
"""

import logging
import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict, ValidationError
from enum import Enum

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config" / "settings"


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Fail fast on validation errors
    LENIENT = "lenient"    # Log warnings, use defaults


class UIConfig(BaseModel):
    """UI Configuration"""
    model_config = ConfigDict(extra='forbid')

    flet_web_mode: bool = Field(default=False, description="Enable web mode")
    flet_port: int = Field(default=8550, ge=1024, le=65535, description="Web server port")
    flet_web_renderer: str = Field(default="auto", description="Web renderer type")

    # Theme and appearance
    theme_mode: str = Field(default="system", pattern="^(system|light|dark)$", description="UI theme mode")
    primary_color: str = Field(default="#6650A4", description="Primary UI color (theme seed)")

    # Window
    window_width: int = Field(default=360, ge=200, le=4096, description="Desktop window width")
    window_height: int = Field(default=720, ge=200, le=4096, description="Desktop window height")


class GreetingsConfig(BaseModel):
    """Greetings List Configuration"""
    model_config = ConfigDict(extra='forbid')

    count: int = Field(default=1000, ge=0, le=100000, description="Number of greetings in the list")
    expanded_text_repeat: int = Field(default=4, ge=1, le=20, description="Repetitions of the expanded text")


class SystemConfig(BaseModel):
    """Complete system configuration"""
    model_config = ConfigDict(extra='forbid')

    ui: UIConfig = Field(default_factory=UIConfig)
    greetings: GreetingsConfig = Field(default_factory=GreetingsConfig)

    # Metadata
    schema_version: int = Field(default=1, description="Configuration schema version")


class ConfigManager:
    """Centralized configuration manager with 3-tier precedence hierarchy"""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir is not None else DEFAULT_CONFIG_DIR
        self._system_config: Optional[SystemConfig] = None
        self._user_config: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

    def _load_system_defaults(self) -> SystemConfig:
        """Load system default configuration"""
        if self._system_config is None:
            defaults_path = self.config_dir / "defaults.yaml"
            defaults_dict = self._load_yaml_file(defaults_path)

            try:
                self._system_config = SystemConfig(**defaults_dict)
            except ValidationError as e:
                logger.warning(f"System defaults validation failed: {e}")
                # Use Pydantic defaults
                self._system_config = SystemConfig()

        return self._system_config

    def _load_user_config(self) -> Dict[str, Any]:
        """Load user-level configuration"""
        if self._user_config is None:
            user_path = self.config_dir / "user.yaml"
            self._user_config = self._load_yaml_file(user_path)

        return self._user_config

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → user → system"""
        # Start with system defaults
        system_config = self._load_system_defaults()
        merged = system_config.model_dump()

        # Apply user overrides
        user_config = self._load_user_config()
        self._deep_merge(merged, user_config)

        # Apply environment overrides
        env_overrides = self._get_env_overrides()
        self._deep_merge(merged, env_overrides)

        return merged

    def _deep_merge(self, base: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Deep merge configuration dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Extract configuration overrides from environment variables"""
        env_map = {
            # UI configuration
            'FLET_WEB_MODE': ('ui', 'flet_web_mode'),
            'FLET_PORT': ('ui', 'flet_port'),
            'FLET_WEB_RENDERER': ('ui', 'flet_web_renderer'),
            'CODELAB_THEME_MODE': ('ui', 'theme_mode'),

            # Greetings list
            'CODELAB_GREETINGS_COUNT': ('greetings', 'count'),
        }

        overrides: Dict[str, Any] = {}
        for env_key, (section, config_key) in env_map.items():
            value = os.getenv(env_key)
            if value is None:
                continue

            # Type conversion
            if config_key in ['flet_port', 'count']:
                try:
                    converted: Any = int(value)
                except ValueError:
                    logger.warning(f"Ignoring non-integer {env_key}={value!r}")
                    continue
            elif config_key in ['flet_web_mode']:
                converted = value.lower() in ('true', '1', 'yes', 'on')
            else:
                converted = value.lower()

            overrides.setdefault(section, {})[config_key] = converted

        return overrides

    def get_config(self, validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
        """Get merged configuration with validation"""
        merged_config = self._merge_configs()

        try:
            return SystemConfig(**merged_config)
        except ValidationError as e:
            if validation_level == ValidationLevel.STRICT:
                raise ValueError(f"Configuration validation failed: {e}")
            logger.warning(f"Configuration validation failed, using defaults: {e}")
            return SystemConfig()


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get global configuration manager instance"""
    global _config_manager
    if _config_manager is None or config_dir is not None:
        _config_manager = ConfigManager(config_dir)
    return _config_manager


def get_config(validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
    """Get current system configuration"""
    return get_config_manager().get_config(validation_level)
