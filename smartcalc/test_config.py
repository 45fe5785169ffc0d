import logging

import pytest
from pydantic import ValidationError

from smartcalc.config import Settings, load_settings


def test_defaults(monkeypatch):
    for name in ("HISTORY_FILE", "HISTORY_ENABLED", "LOG_LEVEL", "PROMPT"):
        monkeypatch.delenv(f"SMARTCALC_{name}", raising=False)
    settings = load_settings(dotenv=False)
    assert settings.history_enabled is True
    assert settings.log_level == "WARNING"
    assert settings.prompt == "> "


def test_environment_variables(monkeypatch, tmp_path):
    monkeypatch.setenv("SMARTCALC_HISTORY_FILE", str(tmp_path / "h"))
    monkeypatch.setenv("SMARTCALC_HISTORY_ENABLED", "false")
    monkeypatch.setenv("SMARTCALC_LOG_LEVEL", "debug")
    settings = load_settings(dotenv=False)
    assert settings.history_file == str(tmp_path / "h")
    assert settings.history_enabled is False
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == logging.DEBUG


def test_overrides_win_and_none_is_ignored(monkeypatch):
    monkeypatch.setenv("SMARTCALC_LOG_LEVEL", "info")
    settings = load_settings({"log_level": "error", "history_file": None}, dotenv=False)
    assert settings.log_level == "ERROR"


def test_invalid_values():
    with pytest.raises(ValidationError):
        Settings(log_level="loud")
    with pytest.raises(ValidationError):
        Settings(history_file="  ")
    with pytest.raises(ValidationError):
        Settings(prompt="")
