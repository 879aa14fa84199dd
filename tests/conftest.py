"""Shared fixtures for the codelab test suite."""

from __future__ import annotations

import pytest

from codelab.app.state import Store
from codelab.shared.core.configuration import SystemConfig

CONFIG_ENV_VARS = [
    "FLET_WEB_MODE",
    "FLET_PORT",
    "FLET_WEB_RENDERER",
    "CODELAB_THEME_MODE",
    "CODELAB_GREETINGS_COUNT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def store() -> Store:
    return Store(SystemConfig())


class Recorder:
    """Zero-argument callback that counts its calls."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
