# src/tasktrack/cli/commands.py

"""
Command handlers.

Each handler takes the prepared AppState (loaded, recomputed, sorted) and
returns the text to print. Validation problems are raised as TaskError and
reported by the caller; they never prevent the save.
"""

from __future__ import annotations

from datetime import datetime

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import Task

LIST_TITLE_WIDTH = 60
LIST_STATUS_WIDTH = 8

LIST_DATE_FORMAT = "%d/%m/%Y"
DETAIL_DATE_FORMAT = "%H:%M, %d-%m-%Y"


def _fmt_dt(value: datetime | None, fmt: str, missing: str = "-") -> str:
    return value.strftime(fmt) if value is not None else missing


def _parse_due(state: AppState, raw: str | None) -> datetime | None:
    if raw is None:
        return None
    return task_api.parse_due_date(raw, state.settings.date_format)


def format_task_line(task_id: int, task: Task) -> str:
    return (
        f" ~ {task_id}: {task.title:<{LIST_TITLE_WIDTH}} | "
        f"Status: {task.status.value:<{LIST_STATUS_WIDTH}}, "
        f"Start: {_fmt_dt(task.start_time, LIST_DATE_FORMAT)} "
        f"Urg: {task.urgency:.2f}"
    )


def format_task_detail(task_id: int, task: Task) -> str:
    start = _fmt_dt(task.start_time, DETAIL_DATE_FORMAT)
    due = _fmt_dt(task.due_time, DETAIL_DATE_FORMAT, missing="No Due Date")
    return "\n".join(
        [
            f" -{task_id}- {task.title} --- urgency: {task.urgency:.2f}",
            f"  {task.description}",
            f" - start: {start}    due: {due}",
        ]
    )


def cmd_list(state: AppState) -> str:
    if not state.tasks:
        return "There are currently no tasks :)"
    lines = ["Tasks:"]
    for task_id, task in enumerate(state.tasks):
        lines.append(format_task_line(task_id, task))
    return "\n".join(lines)


def cmd_view(state: AppState, task_id: int) -> str:
    return format_task_detail(task_id, state.tasks.resolve(task_id))


def cmd_add(
    state: AppState,
    name: str,
    *,
    description: str | None = None,
    urgency: float | None = None,
    due_time: str | None = None,
) -> str:
    due = _parse_due(state, due_time)
    task_id = task_api.add_task(
        state, name, description=description, urgency=urgency, due_time=due
    )
    # The new ID is provisional: the next invocation re-sorts.
    return f"Added task {task_id}: {name}"


def cmd_edit(
    state: AppState,
    task_id: int,
    *,
    name: str | None = None,
    description: str | None = None,
    urgency: float | None = None,
    due_time: str | None = None,
) -> str:
    due = _parse_due(state, due_time)
    task = task_api.edit_task(
        state, task_id, title=name, description=description, urgency=urgency, due_time=due
    )
    return f"Updated task {task_id}: {task.title}"


def cmd_start(state: AppState, task_id: int) -> str:
    task = task_api.start_task(state, task_id)
    return f"Started task {task_id}: {task.title}"


def cmd_stop(state: AppState, task_id: int) -> str:
    task = task_api.stop_task(state, task_id)
    return f"Stopped task {task_id}: {task.title}"


def cmd_done(state: AppState, task_id: int) -> str:
    task = task_api.complete_task(state, task_id)
    return f"Completed task {task_id}: {task.title}"


def cmd_remove(state: AppState, task_id: int) -> str:
    task = task_api.remove_task(state, task_id)
    return f"Removed task {task_id}: {task.title}"
