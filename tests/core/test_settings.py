"""Tests for core.settings module.

Covers:
- CalendarSettings defaults
- CALENDAR_JP_ environment variable overrides
- log_level validation
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from calendar_jp.core.settings import CalendarSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ("RULES_PATH", "LOG_LEVEL", "JSON_LOGS", "CACHE_ENABLED"):
        monkeypatch.delenv(f"CALENDAR_JP_{key}", raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)


class TestCalendarSettingsDefaults:
    def test_defaults(self):
        s = CalendarSettings()
        assert s.rules_path is None
        assert s.log_level == "INFO"
        assert s.json_logs is None
        assert s.cache_enabled is True


class TestCalendarSettingsEnvOverride:
    def test_rules_path(self, monkeypatch):
        monkeypatch.setenv("CALENDAR_JP_RULES_PATH", "/tmp/rules.json")
        assert CalendarSettings().rules_path == Path("/tmp/rules.json")

    def test_log_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("CALENDAR_JP_LOG_LEVEL", "debug")
        assert CalendarSettings().log_level == "DEBUG"

    def test_cache_disabled(self, monkeypatch):
        monkeypatch.setenv("CALENDAR_JP_CACHE_ENABLED", "false")
        assert CalendarSettings().cache_enabled is False

    def test_json_logs(self, monkeypatch):
        monkeypatch.setenv("CALENDAR_JP_JSON_LOGS", "true")
        assert CalendarSettings().json_logs is True

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert CalendarSettings().log_level == "INFO"

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("CALENDAR_JP_LOG_LEVEL=WARNING\n", encoding="utf-8")
        assert CalendarSettings().log_level == "WARNING"


class TestCalendarSettingsValidation:
    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            CalendarSettings(log_level="LOUD")
