# src/tasktrack/tasks/urgency.py

"""
Urgency decay model.

Two pure functions compute the minimum urgency a task should have at `now`:
- with a due time, urgency grows linearly from start to due and keeps growing
  past the due time (no ceiling, so overdue tasks escalate);
- without one, urgency grows half a point per whole day of age, capped at
  MAXIMUM_URGENCY.

`now` is always passed in; nothing here reads the clock.
"""

from __future__ import annotations

from datetime import datetime

from .errors import TaskPreconditionError
from .task_models import Task

MAXIMUM_URGENCY = 10.0
URGENCY_MULTIPLIER = 0.5

_SECONDS_PER_DAY = 86400


def deadline_floor(start_time: datetime, due_time: datetime, now: datetime) -> float:
    total = (due_time - start_time).total_seconds()
    elapsed = (now - start_time).total_seconds()

    if total == 0:
        # Start and due coincide: treat as fully elapsed once started.
        ratio = 1.0 if elapsed >= 0 else 0.0
    else:
        ratio = elapsed / total

    return ratio * MAXIMUM_URGENCY


def age_floor(start_time: datetime, now: datetime) -> float:
    # int() truncates toward zero, so a start in the future counts as day 0.
    days = int((now - start_time).total_seconds() / _SECONDS_PER_DAY)
    return min(days * URGENCY_MULTIPLIER, MAXIMUM_URGENCY)


def urgency_floor(task: Task, now: datetime) -> float:
    """Return the minimum urgency `task` should carry at `now`.

    A negative result (due time before start time) is valid and simply never
    raises the stored urgency.
    """
    if task.start_time is None:
        raise TaskPreconditionError(f"Task {task.title!r} has no start time")

    if task.due_time is not None:
        return deadline_floor(task.start_time, task.due_time, now)
    return age_floor(task.start_time, now)
