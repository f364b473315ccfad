# src/tasktrack/core/clock.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta


class SystemClock:
    """Wall clock, naive local time (what the task file stores)."""

    def now(self) -> datetime:
        return datetime.now()


@dataclass(slots=True)
class FixedClock:
    """Deterministic clock for tests and replays."""

    current: datetime = field(default_factory=lambda: datetime(2024, 1, 1, 12, 0, 0))

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current = self.current + delta
