"""Tests for the task diff and the events built from it."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from app.domain.entities import Task
from app.domain.events import (
    TASK_ASSIGNEE_CHANGED,
    TASK_DESCRIPTION_CHANGED,
    TASK_DUE_DATE_CHANGED,
    TASK_PRIORITY_CHANGED,
    TASK_STATUS_CHANGED,
    TASK_TITLE_CHANGED,
    TASK_UNASSIGNED,
)
from app.domain.task_changes import (
    AssigneeChanged,
    DueDateChanged,
    StatusChanged,
    Unassigned,
    build_task_events,
    diff_task,
    requires_assignee_name,
)


@pytest.fixture()
def task() -> Task:
    return Task(
        id="task-1",
        project_id="project-1",
        title="Fix login",
        description="",
        status="to-do",
        priority="low",
        due_date=None,
        user_id=None,
        position=0,
        number=1,
    )


def test_identical_tasks_produce_no_changes(task):
    assert diff_task(task, replace(task)) == []


def test_empty_and_missing_assignee_are_equal(task):
    assert diff_task(replace(task, user_id=""), replace(task, user_id=None)) == []


def test_due_dates_compare_by_instant(task):
    utc = datetime(2025, 3, 5, 12, 0, tzinfo=timezone.utc)
    shifted = utc.astimezone(timezone(timedelta(hours=-5)))

    assert diff_task(replace(task, due_date=utc), replace(task, due_date=shifted)) == []


def test_changes_follow_the_fixed_field_order(task):
    new = replace(
        task,
        title="Fix sign in",
        description="Steps to reproduce",
        status="in-progress",
        priority="high",
        user_id="user-2",
        due_date=datetime(2025, 3, 5, tzinfo=timezone.utc),
    )

    events = build_task_events(
        new, diff_task(task, new), actor_id="user-1", assignee_name="Grace"
    )

    assert [event.name for event in events] == [
        TASK_STATUS_CHANGED,
        TASK_PRIORITY_CHANGED,
        TASK_ASSIGNEE_CHANGED,
        TASK_DUE_DATE_CHANGED,
        TASK_TITLE_CHANGED,
        TASK_DESCRIPTION_CHANGED,
    ]
    assert all(event.payload["user_id"] == "user-1" for event in events)
    assert all(event.payload["title"] == "Fix sign in" for event in events)


def test_clearing_the_assignee_is_an_unassignment(task):
    old = replace(task, user_id="user-2")
    changes = diff_task(old, replace(old, user_id=None))

    assert changes == [Unassigned(old="user-2")]
    assert not requires_assignee_name(changes)

    (event,) = build_task_events(task, changes, actor_id="user-1")
    assert event.name == TASK_UNASSIGNED
    assert event.payload["old_assignee"] == "user-2"
    assert event.payload["type"] == "unassigned"


def test_assignee_change_carries_the_display_name(task):
    changes = diff_task(task, replace(task, user_id="user-2"))

    assert changes == [AssigneeChanged(old=None, new="user-2")]
    assert requires_assignee_name(changes)

    (event,) = build_task_events(task, changes, actor_id="user-1", assignee_name="Grace")
    assert event.payload["new_assignee"] == "user-2"
    assert event.payload["new_assignee_name"] == "Grace"


def test_status_change_payload(task):
    changes = diff_task(task, replace(task, status="done"))

    assert changes == [StatusChanged(old="to-do", new="done")]
    (event,) = build_task_events(task, changes, actor_id=None)
    assert event.payload["old_status"] == "to-do"
    assert event.payload["new_status"] == "done"
    assert event.payload["user_id"] is None


def test_removed_due_date_is_reported_as_none(task):
    old = replace(task, due_date=datetime(2025, 3, 5, tzinfo=timezone.utc))

    assert diff_task(old, replace(old, due_date=None)) == [
        DueDateChanged(old="2025-03-05T00:00:00Z", new=None)
    ]


def test_unsaved_task_cannot_publish(task):
    with pytest.raises(ValueError):
        build_task_events(replace(task, id=None), [StatusChanged("to-do", "done")], actor_id="u")
