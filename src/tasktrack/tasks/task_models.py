# src/tasktrack/tasks/task_models.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from .errors import InvalidTaskIdError

logger = logging.getLogger(__name__)

DEFAULT_URGENCY = 3.0


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values match the stored JSON spelling ("Inactive", "Active", "Done").
    """

    INACTIVE = "Inactive"
    ACTIVE = "Active"
    DONE = "Done"

    @classmethod
    def from_str(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.INACTIVE
        try:
            return cls(raw)
        except ValueError:
            logger.warning("Unknown task status %r, treating as %s", raw, cls.INACTIVE.value)
            return cls.INACTIVE


@dataclass(slots=True)
class Task:
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.INACTIVE
    urgency: float = DEFAULT_URGENCY
    start_time: datetime | None = None
    due_time: datetime | None = None

    @classmethod
    def new(cls, title: str, *, now: datetime) -> Task:
        return cls(title=title, start_time=now)

    @property
    def is_done(self) -> bool:
        return self.status is TaskStatus.DONE


class TaskList:
    """
    Ordered task collection.

    Position is the only identity a task has: the ID shown to the user is the
    index after the urgency engine has sorted the list in this process.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self.tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __bool__(self) -> bool:
        return bool(self.tasks)

    def append(self, task: Task) -> int:
        self.tasks.append(task)
        return len(self.tasks) - 1

    def resolve(self, task_id: int) -> Task:
        """Map a positional ID to its task. Negative indexes are rejected."""
        if not 0 <= task_id < len(self.tasks):
            raise InvalidTaskIdError(task_id, len(self.tasks))
        return self.tasks[task_id]

    def remove(self, task_id: int) -> Task:
        task = self.resolve(task_id)
        del self.tasks[task_id]
        return task
