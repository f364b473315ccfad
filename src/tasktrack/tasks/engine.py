# src/tasktrack/tasks/engine.py

from __future__ import annotations

import logging
import math
from datetime import datetime

from .task_models import Task, TaskList
from .urgency import urgency_floor

logger = logging.getLogger(__name__)


def _sort_key(task: Task) -> tuple[bool, float]:
    # NaN goes last; everything else descending by urgency.
    u = task.urgency
    if math.isnan(u):
        return (True, 0.0)
    return (False, -u)


def recompute_urgencies(tasks: TaskList, now: datetime) -> int:
    """
    Raise every open task's urgency to its decay floor.

    Done tasks are left alone. Urgency is never lowered here.
    Returns the number of tasks whose urgency changed.
    """
    raised = 0
    for task in tasks:
        if task.is_done:
            continue
        floor = urgency_floor(task, now)
        if floor > task.urgency:
            logger.debug("Urgency raised title=%r %.4f -> %.4f", task.title, task.urgency, floor)
            task.urgency = floor
            raised += 1
    return raised


def sort_by_urgency(tasks: TaskList) -> None:
    """Stable, descending, in place. Ties keep their previous order."""
    tasks.tasks.sort(key=_sort_key)


def recompute_and_sort(tasks: TaskList, now: datetime) -> int:
    """
    Bring urgencies up to date, then reorder the collection.

    Positional IDs are only meaningful after this has run in the current process.
    """
    raised = recompute_urgencies(tasks, now)
    sort_by_urgency(tasks)
    logger.debug("Recomputed %d tasks at %s (%d raised)", len(tasks), now.isoformat(), raised)
    return raised
