# tests/test_task_api.py

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from tasktrack.core.state import AppState
from tasktrack.tasks import task_api
from tasktrack.tasks.errors import InvalidDateError, InvalidTaskIdError, InvalidUrgencyError
from tasktrack.tasks.task_models import DEFAULT_URGENCY, TaskStatus

from .conftest import NOW


def test_add_task_uses_defaults(state: AppState) -> None:
    task_id = task_api.add_task(state, "write report")

    task = state.tasks.resolve(task_id)
    assert task_id == 0
    assert task.title == "write report"
    assert task.description == ""
    assert task.status is TaskStatus.INACTIVE
    assert task.urgency == DEFAULT_URGENCY
    assert task.start_time == NOW
    assert task.due_time is None


def test_add_task_with_optional_fields(state: AppState) -> None:
    due = NOW + timedelta(days=3)
    task_id = task_api.add_task(
        state, "pay rent", description="landlord", urgency=7.5, due_time=due
    )

    task = state.tasks.resolve(task_id)
    assert task.description == "landlord"
    assert task.urgency == 7.5
    assert task.due_time == due


def test_add_task_rejects_bad_urgency_without_appending(state: AppState) -> None:
    with pytest.raises(InvalidUrgencyError):
        task_api.add_task(state, "nope", urgency=11.0)
    assert len(state.tasks) == 0


@pytest.mark.parametrize("urgency", [-0.1, 10.01, float("nan")])
def test_set_urgency_range(state: AppState, urgency: float) -> None:
    task_api.add_task(state, "a")
    with pytest.raises(InvalidUrgencyError):
        task_api.set_urgency(state, 0, urgency)
    assert state.tasks.resolve(0).urgency == DEFAULT_URGENCY


@pytest.mark.parametrize("urgency", [0.0, 10.0])
def test_set_urgency_accepts_bounds(state: AppState, urgency: float) -> None:
    task_api.add_task(state, "a")
    task_api.set_urgency(state, 0, urgency)
    assert state.tasks.resolve(0).urgency == urgency


def test_edit_task_applies_given_fields_only(state: AppState) -> None:
    task_api.add_task(state, "draft", description="keep me")
    task_api.edit_task(state, 0, title="final", urgency=6.0)

    task = state.tasks.resolve(0)
    assert task.title == "final"
    assert task.description == "keep me"
    assert task.urgency == 6.0


def test_edit_task_with_bad_urgency_changes_nothing(state: AppState) -> None:
    task_api.add_task(state, "draft")
    with pytest.raises(InvalidUrgencyError):
        task_api.edit_task(state, 0, title="final", urgency=42.0)
    assert state.tasks.resolve(0).title == "draft"


def test_status_transitions(state: AppState) -> None:
    task_api.add_task(state, "a", urgency=6.0)

    assert task_api.start_task(state, 0).status is TaskStatus.ACTIVE
    assert task_api.stop_task(state, 0).status is TaskStatus.INACTIVE

    done = task_api.complete_task(state, 0)
    assert done.status is TaskStatus.DONE
    assert done.urgency == 0.0


def test_remove_task(state: AppState) -> None:
    task_api.add_task(state, "a")
    task_api.add_task(state, "b")

    removed = task_api.remove_task(state, 0)

    assert removed.title == "a"
    assert [t.title for t in state.tasks] == ["b"]


@pytest.mark.parametrize("task_id", [-1, 1, 99])
def test_invalid_ids_are_rejected(state: AppState, task_id: int) -> None:
    task_api.add_task(state, "only")
    with pytest.raises(InvalidTaskIdError):
        task_api.start_task(state, task_id)
    with pytest.raises(InvalidTaskIdError):
        task_api.remove_task(state, task_id)
    assert len(state.tasks) == 1


def test_invalid_id_on_empty_list_message(state: AppState) -> None:
    with pytest.raises(InvalidTaskIdError, match="no tasks"):
        task_api.complete_task(state, 0)


def test_refresh_reorders_and_ids_follow(state: AppState, clock) -> None:
    task_api.add_task(state, "later", urgency=1.0)
    task_api.add_task(state, "now", urgency=9.0)

    task_api.refresh(state)

    assert state.tasks.resolve(0).title == "now"
    assert state.tasks.resolve(1).title == "later"


def test_refresh_uses_one_time_per_invocation(state: AppState, clock) -> None:
    task_api.add_task(state, "aging")
    clock.advance(timedelta(days=30))

    # state.now was captured by add_task; later clock moves are not seen.
    task_api.refresh(state)
    assert state.tasks.resolve(0).urgency == DEFAULT_URGENCY


def test_parse_due_date() -> None:
    assert task_api.parse_due_date("31/12/2025", "%d/%m/%Y") == datetime(2025, 12, 31)
    assert task_api.parse_due_date(" 01/02/2026 ", "%d/%m/%Y") == datetime(2026, 2, 1)


@pytest.mark.parametrize("text", ["2025-12-31", "32/01/2025", "", "tomorrow"])
def test_parse_due_date_rejects_bad_input(text: str) -> None:
    with pytest.raises(InvalidDateError):
        task_api.parse_due_date(text, "%d/%m/%Y")
