# src/tasktrack/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..tasks.task_models import TaskList
from .ports import Clock, TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Any

    store: TaskRepo
    clock: Clock

    tasks: TaskList = field(default_factory=TaskList)
    # "now" captured once per invocation; every computation in the run uses it.
    now: datetime | None = None

    def current_time(self) -> datetime:
        if self.now is None:
            self.now = self.clock.now()
        return self.now
