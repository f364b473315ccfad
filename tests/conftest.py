# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from tasktrack.core.clock import FixedClock
from tasktrack.core.state import AppState
from tasktrack.tasks.task_store import TaskStore

NOW = datetime(2024, 3, 15, 12, 0, 0)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="tasktrack",
        log_level="WARNING",
        log_file_enabled=False,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        date_format="%d/%m/%Y",
    )


@pytest.fixture()
def root_logging() -> Iterator[logging.Logger]:
    """Undo setup_logging(): restore root handlers and level after the test."""
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture()
def state(settings: SimpleNamespace, clock: FixedClock) -> AppState:
    """
    AppState wired with a fixed clock.

    We keep the real JSON TaskStore (on tmp_path) because its round trip is
    part of what the CLI tests check.
    """
    return AppState(settings=settings, store=TaskStore(settings.tasks_path), clock=clock)
