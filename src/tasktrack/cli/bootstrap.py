# src/tasktrack/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the concrete store and clock into AppState,
- loads the task file before a command runs and saves it afterwards.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.clock import SystemClock
from ..core.ports import Clock
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, clock: Clock | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(
        settings=settings,
        store=TaskStore(settings.tasks_path),
        clock=clock or SystemClock(),
    )


def load_tasks(state: AppState) -> None:
    """Replace state.tasks with the stored list (empty if there is no file yet)."""
    state.tasks = state.store.load_or_empty()


def save_tasks(state: AppState) -> None:
    state.store.save(state.tasks)
    logger.info("Saved %d tasks", len(state.tasks))
