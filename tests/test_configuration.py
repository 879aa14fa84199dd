"""Tests for the layered configuration manager."""

import pytest
import yaml

from codelab.shared.core.configuration import (
    ConfigManager,
    SystemConfig,
    ValidationLevel,
)


def _write(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


def test_pydantic_defaults(tmp_path, clean_env):
    config = ConfigManager(tmp_path).get_config()
    assert config == SystemConfig()
    assert config.greetings.count == 1000
    assert config.greetings.expanded_text_repeat == 4
    assert config.ui.theme_mode == "system"


def test_bundled_defaults_load(clean_env):
    config = ConfigManager().get_config()
    assert config.greetings.count == 1000
    assert config.ui.flet_port == 8550


def test_user_overrides_defaults(tmp_path, clean_env):
    _write(tmp_path / "defaults.yaml", {"greetings": {"count": 50}})
    _write(tmp_path / "user.yaml", {"greetings": {"count": 20}, "ui": {"theme_mode": "dark"}})

    config = ConfigManager(tmp_path).get_config()

    assert config.greetings.count == 20
    assert config.greetings.expanded_text_repeat == 4
    assert config.ui.theme_mode == "dark"


def test_env_overrides_user(tmp_path, clean_env):
    _write(tmp_path / "user.yaml", {"greetings": {"count": 20}})
    clean_env.setenv("CODELAB_GREETINGS_COUNT", "7")
    clean_env.setenv("FLET_WEB_MODE", "yes")
    clean_env.setenv("CODELAB_THEME_MODE", "LIGHT")

    config = ConfigManager(tmp_path).get_config()

    assert config.greetings.count == 7
    assert config.ui.flet_web_mode is True
    assert config.ui.theme_mode == "light"


def test_non_integer_env_ignored(tmp_path, clean_env):
    clean_env.setenv("FLET_PORT", "not-a-port")
    assert ConfigManager(tmp_path).get_config().ui.flet_port == 8550


def test_strict_validation_raises(tmp_path, clean_env):
    _write(tmp_path / "user.yaml", {"greetings": {"count": -1}})
    with pytest.raises(ValueError):
        ConfigManager(tmp_path).get_config(ValidationLevel.STRICT)


def test_lenient_validation_falls_back(tmp_path, clean_env):
    _write(tmp_path / "user.yaml", {"ui": {"theme_mode": "neon"}})
    config = ConfigManager(tmp_path).get_config(ValidationLevel.LENIENT)
    assert config == SystemConfig()


def test_invalid_defaults_use_pydantic_defaults(tmp_path, clean_env):
    _write(tmp_path / "defaults.yaml", {"unknown_section": {}})
    assert ConfigManager(tmp_path).get_config() == SystemConfig()


def test_broken_yaml_is_ignored(tmp_path, clean_env):
    (tmp_path / "user.yaml").write_text("greetings: [unclosed", encoding="utf-8")
    assert ConfigManager(tmp_path).get_config() == SystemConfig()

