# src/tasktrack/core/ports.py

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage and the clock swappable and makes testing easier.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from ..tasks.task_models import TaskList


class Clock(Protocol):
    """Single source of "now" for one invocation."""

    def now(self) -> datetime: ...


class TaskRepo(Protocol):
    def load(self) -> TaskList: ...
    def load_or_empty(self) -> TaskList: ...
    def save(self, tasks: TaskList) -> None: ...
