"""Runtime settings loaded from SMARTCALC_* environment variables and .env files."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "SMARTCALC_"
DEFAULT_HISTORY_FILE = os.path.expanduser("~/.smartcalc_history")

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """Calculator session settings."""
    history_file: str = DEFAULT_HISTORY_FILE
    history_enabled: bool = True
    log_level: str = "WARNING"
    prompt: str = Field(default="> ", min_length=1)

    @field_validator('history_file')
    @classmethod
    def history_file_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('History file cannot be empty')
        return os.path.expanduser(v.strip())

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(overrides: Optional[Dict[str, Any]] = None, dotenv: bool = True) -> Settings:
    """Build Settings from the environment, then apply non-None overrides.

    ``SMARTCALC_HISTORY_FILE``, ``SMARTCALC_HISTORY_ENABLED``,
    ``SMARTCALC_LOG_LEVEL`` and ``SMARTCALC_PROMPT`` are read after loading
    a ``.env`` file from the working directory (when ``dotenv`` is true).
    """
    if dotenv:
        load_dotenv()
    values: Dict[str, Any] = {}
    for name in Settings.model_fields:
        raw = os.getenv(ENV_PREFIX + name.upper())
        if raw is not None:
            values[name] = raw
    for name, value in (overrides or {}).items():
        if value is not None:
            values[name] = value
    return Settings(**values)
