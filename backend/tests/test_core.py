"""
Tests for configuration, logging setup and calendar helpers.
"""

import logging
from datetime import datetime

from plantcare.core.calendar import is_all_day_event
from plantcare.core.config import Settings, get_settings
from plantcare.core.logging import setup_logging


def test_settings_defaults():
    settings = Settings()
    assert settings.API_PREFIX == "/api/v1"
    assert settings.METRICS_ENABLED is True


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    settings = Settings()
    assert settings.ENVIRONMENT == "production"
    assert settings.LOG_LEVEL == "WARNING"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_setup_logging_installs_one_handler():
    setup_logging()
    setup_logging()
    names = [handler.get_name() for handler in logging.getLogger().handlers]
    assert names.count("plantcare") == 1


def test_all_day_event():
    assert is_all_day_event(datetime(2025, 6, 3, 0, 0), datetime(2025, 6, 3, 23, 59))
    assert not is_all_day_event(datetime(2025, 6, 3, 9, 0), datetime(2025, 6, 3, 10, 0))
