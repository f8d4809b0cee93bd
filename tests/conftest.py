"""
Shared fixtures
"""
import os

import pytest

from config_generator.settings import ENV_PREFIX, get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from CONFIG_GENERATOR_* variables and cached settings"""
    for name in list(os.environ):
        if name.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
