# src/tasktrack/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """User-facing command error. Reported, never fatal to the invocation."""


class InvalidTaskIdError(TaskError):
    def __init__(self, task_id: int, size: int) -> None:
        self.task_id = task_id
        self.size = size
        if size == 0:
            msg = f"Invalid ID {task_id}: there are no tasks"
        else:
            msg = f"Invalid ID {task_id}: expected 0..{size - 1}"
        super().__init__(msg)


class InvalidUrgencyError(TaskError):
    def __init__(self, urgency: float) -> None:
        self.urgency = urgency
        super().__init__(f"Urgency must be between 0.0 and 10.0, you inputted {urgency}")


class InvalidDateError(TaskError):
    def __init__(self, text: str, fmt: str) -> None:
        self.text = text
        self.fmt = fmt
        super().__init__(f"Error parsing date {text!r}, expected format {fmt}")


class TaskPreconditionError(Exception):
    """A stored task violates an invariant the urgency math depends on."""
