# src/tasktrack/tasks/task_api.py

"""
Task operations used by the command layer.

Every function expects `state.tasks` to be loaded and already passed through
`refresh()` in this process, so positional IDs match what `list` shows.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ..core.state import AppState
from .engine import recompute_and_sort
from .errors import InvalidDateError, InvalidUrgencyError
from .task_models import Task, TaskStatus
from .urgency import MAXIMUM_URGENCY

logger = logging.getLogger(__name__)


def refresh(state: AppState) -> int:
    """Recompute urgencies and re-sort. Must run before any ID is interpreted."""
    return recompute_and_sort(state.tasks, state.current_time())


def parse_due_date(text: str, fmt: str) -> datetime:
    """Parse a user-supplied due date. Date-only formats land on midnight."""
    try:
        return datetime.strptime(text.strip(), fmt)
    except ValueError as e:
        raise InvalidDateError(text, fmt) from e


def _validate_urgency(urgency: float) -> float:
    # NaN fails both comparisons and is rejected too.
    if not 0.0 <= urgency <= MAXIMUM_URGENCY:
        raise InvalidUrgencyError(urgency)
    return float(urgency)


# ---- setters ----


def set_title(state: AppState, task_id: int, title: str) -> None:
    state.tasks.resolve(task_id).title = title


def set_description(state: AppState, task_id: int, description: str) -> None:
    state.tasks.resolve(task_id).description = description


def set_status(state: AppState, task_id: int, status: TaskStatus) -> None:
    task = state.tasks.resolve(task_id)
    logger.debug("Status id=%s %s -> %s", task_id, task.status.value, status.value)
    task.status = status


def set_urgency(state: AppState, task_id: int, urgency: float) -> None:
    task = state.tasks.resolve(task_id)
    task.urgency = _validate_urgency(urgency)


def set_due_time(state: AppState, task_id: int, due_time: datetime) -> None:
    state.tasks.resolve(task_id).due_time = due_time


# ---- commands ----


def add_task(
    state: AppState,
    title: str,
    *,
    description: str | None = None,
    urgency: float | None = None,
    due_time: datetime | None = None,
) -> int:
    """
    Append a new task (Inactive, default urgency, started now) and return its ID.

    Optional fields are validated before anything is appended, so a rejected
    urgency leaves the list untouched.
    """
    if urgency is not None:
        urgency = _validate_urgency(urgency)

    task_id = state.tasks.append(Task.new(title, now=state.current_time()))
    if description is not None:
        set_description(state, task_id, description)
    if urgency is not None:
        set_urgency(state, task_id, urgency)
    if due_time is not None:
        set_due_time(state, task_id, due_time)

    logger.info("Task added id=%s title=%r due=%s", task_id, title, due_time)
    return task_id


def edit_task(
    state: AppState,
    task_id: int,
    *,
    title: str | None = None,
    description: str | None = None,
    urgency: float | None = None,
    due_time: datetime | None = None,
) -> Task:
    task = state.tasks.resolve(task_id)
    if urgency is not None:
        urgency = _validate_urgency(urgency)

    if title is not None:
        set_title(state, task_id, title)
    if description is not None:
        set_description(state, task_id, description)
    if urgency is not None:
        set_urgency(state, task_id, urgency)
    if due_time is not None:
        set_due_time(state, task_id, due_time)
    return task


def start_task(state: AppState, task_id: int) -> Task:
    set_status(state, task_id, TaskStatus.ACTIVE)
    return state.tasks.resolve(task_id)


def stop_task(state: AppState, task_id: int) -> Task:
    set_status(state, task_id, TaskStatus.INACTIVE)
    return state.tasks.resolve(task_id)


def complete_task(state: AppState, task_id: int) -> Task:
    """Mark Done and drop urgency to 0; Done tasks are frozen from then on."""
    set_status(state, task_id, TaskStatus.DONE)
    set_urgency(state, task_id, 0.0)
    return state.tasks.resolve(task_id)


def remove_task(state: AppState, task_id: int) -> Task:
    task = state.tasks.remove(task_id)
    logger.info("Task removed id=%s title=%r", task_id, task.title)
    return task
