# src/tasktrack/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from disk at import time except a local .env.
- Tests build their own settings objects instead of touching the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKTRACK"

DEFAULT_DATA_DIR = Path("~/.local/share/tasktrack")
DEFAULT_DATE_FORMAT = "%d/%m/%Y"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default.expanduser()
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file_enabled: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path

    # ---- Input parsing ----
    date_format: str

    @property
    def log_file_path(self) -> Path:
        return self.data_dir / f"{self.app_name}.log"

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasktrack").strip() or "tasktrack"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file_enabled = _env_bool(_k("LOG_FILE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR)
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")

        date_format = _env(_k("DATE_FORMAT"), DEFAULT_DATE_FORMAT) or DEFAULT_DATE_FORMAT

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file_enabled=log_file_enabled,
            data_dir=data_dir,
            tasks_path=tasks_path,
            date_format=date_format,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Real env vars win over .env entries.
    load_dotenv(override=False)
    return Settings.from_env()
