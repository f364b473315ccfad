# src/tasktrack/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import math
import os
from datetime import datetime
from pathlib import Path
from typing import Any

from .task_models import DEFAULT_URGENCY, Task, TaskList, TaskStatus

logger = logging.getLogger(__name__)


class TaskStoreError(Exception):
    """The task file could not be read, parsed or written."""


class TaskStoreNotFoundError(TaskStoreError):
    """No task file yet. Callers usually start with an empty list."""


class TaskStore:
    """
    JSON file task store.

    Layout: {"tasks": [{title, description, status, urgency, start_time, due_time}]}
    Timestamps are naive local ISO-8601 strings or null.

    Writes go to a temp file first and are moved into place with os.replace,
    so a failed save never truncates the existing file. There is no locking:
    two concurrent invocations can still overwrite each other.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- (de)serialization helpers ----

    @staticmethod
    def _dt_to_str(value: datetime | None) -> str | None:
        return value.isoformat() if value is not None else None

    @staticmethod
    def _str_to_dt(raw: Any, field: str) -> datetime | None:
        if raw is None:
            return None
        if not isinstance(raw, str):
            raise TaskStoreError(f"{field} must be a string or null, got {type(raw).__name__}")
        try:
            value = datetime.fromisoformat(raw)
        except ValueError as e:
            raise TaskStoreError(f"Invalid {field} {raw!r}") from e
        # Urgency math runs on naive local time; offsets would not subtract.
        if value.tzinfo is not None:
            raise TaskStoreError(f"Invalid {field} {raw!r}: expected local time without offset")
        return value

    @staticmethod
    def _task_to_dict(task: Task) -> dict[str, Any]:
        return {
            "title": task.title,
            "description": task.description,
            "status": task.status.value,
            "urgency": task.urgency,
            "start_time": TaskStore._dt_to_str(task.start_time),
            "due_time": TaskStore._dt_to_str(task.due_time),
        }

    @staticmethod
    def _dict_to_task(data: Any, index: int) -> Task:
        if not isinstance(data, dict):
            raise TaskStoreError(f"Task #{index} is not an object")
        try:
            urgency = float(data.get("urgency", DEFAULT_URGENCY))
        except (TypeError, ValueError) as e:
            raise TaskStoreError(f"Task #{index} has invalid urgency") from e
        if math.isnan(urgency):
            logger.warning("Task #%d has NaN urgency; it will sort last", index)
        return Task(
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            status=TaskStatus.from_str(data.get("status")),
            urgency=urgency,
            start_time=TaskStore._str_to_dt(data.get("start_time"), "start_time"),
            due_time=TaskStore._str_to_dt(data.get("due_time"), "due_time"),
        )

    # ---- public API ----

    def load(self) -> TaskList:
        if not self._path.exists():
            raise TaskStoreNotFoundError(f"No task file at {self._path}")
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError) as e:
            raise TaskStoreError(f"Failed to read {self._path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("tasks", []), list):
            raise TaskStoreError(f"Malformed task file {self._path}: expected {{'tasks': [...]}}")

        tasks = TaskList(self._dict_to_task(t, i) for i, t in enumerate(data.get("tasks", [])))
        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def load_or_empty(self) -> TaskList:
        try:
            return self.load()
        except TaskStoreNotFoundError:
            logger.info("No task file at %s yet, starting empty", self._path)
            return TaskList()

    def save(self, tasks: TaskList) -> None:
        payload = {"tasks": [self._task_to_dict(t) for t in tasks]}
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            text = json.dumps(payload, ensure_ascii=False, indent=2)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, "utf-8")
            os.replace(tmp, self._path)
        except (OSError, TypeError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise TaskStoreError(f"Failed to save tasks to {self._path}: {e}") from e
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
