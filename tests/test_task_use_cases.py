"""Tests for the task use cases and the events they publish."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from app.application.event_bus import EventBus
from app.application.use_cases.tasks import (
    create_task,
    get_project_board,
    get_task,
    import_tasks,
    publish_task_changes,
    update_task,
    update_task_priority,
    update_task_status,
)
from app.domain.events import TASK_CREATED, TASK_EVENTS, DomainEvent
from app.infrastructure.repositories import ActivityRepository, NotificationRepository


@pytest.fixture()
def recorded() -> tuple[EventBus, list[DomainEvent]]:
    bus = EventBus()
    events: list[DomainEvent] = []
    for name in TASK_EVENTS:
        bus.subscribe(name, events.append)
    return bus, events


def test_create_task_numbers_tasks_per_project(session, seed, recorded):
    bus, events = recorded

    first = create_task(session, bus, project_id=seed.project_id, title="One", actor_id=seed.owner_id)
    second = create_task(session, bus, project_id=seed.project_id, title="Two", actor_id=seed.owner_id)

    assert (first.number, second.number) == (1, 2)
    assert first.status == "to-do"
    assert first.priority == "low"
    assert [event.name for event in events] == [TASK_CREATED, TASK_CREATED]
    assert events[0].payload["content"] == "created the task"


def test_create_task_in_missing_project_publishes_nothing(session, recorded):
    bus, events = recorded

    with pytest.raises(ValueError, match="Project not found"):
        create_task(session, bus, project_id="missing", title="One", actor_id="u")
    assert events == []


def test_update_missing_task_publishes_nothing(session, recorded):
    bus, events = recorded

    with pytest.raises(ValueError, match="Task not found"):
        update_task_status(session, bus, task_id="missing", actor_id="u", status="done")
    assert events == []


def test_noop_update_publishes_nothing(session, seed, recorded):
    bus, events = recorded
    task = create_task(session, bus, project_id=seed.project_id, title="One", actor_id=seed.owner_id)
    events.clear()

    update_task(
        session,
        bus,
        task_id=task.id,
        actor_id=seed.owner_id,
        title=task.title,
        description=task.description,
        status=task.status,
        priority=task.priority,
        project_id=task.project_id,
        position=task.position,
    )
    update_task_status(session, bus, task_id=task.id, actor_id=seed.owner_id, status="to-do")

    assert events == []


def test_full_update_publishes_one_event_per_changed_field(session, seed, recorded):
    bus, events = recorded
    task = create_task(
        session,
        bus,
        project_id=seed.project_id,
        title="One",
        actor_id=seed.owner_id,
        due_date=datetime(2025, 3, 5, tzinfo=timezone.utc),
    )
    events.clear()

    updated = update_task(
        session,
        bus,
        task_id=task.id,
        actor_id=seed.owner_id,
        title="One",
        description="",
        status="in-progress",
        priority="low",
        project_id=seed.project_id,
        position=task.position,
        user_id=seed.member_id,
    )

    assert updated.due_date is None
    assert [event.name for event in events] == [
        "task.status_changed",
        "task.assignee_changed",
        "task.due_date_changed",
    ]
    assert events[1].payload["new_assignee_name"] == "Grace Hopper"


def test_concurrent_updates_publish_from_their_own_snapshot(session, seed, bus):
    task = create_task(session, bus, project_id=seed.project_id, title="One", actor_id=seed.owner_id)
    stale = get_task(session, task.id)

    update_task_priority(session, bus, task_id=task.id, actor_id=seed.owner_id, priority="high")
    publish_task_changes(
        session,
        bus,
        old=stale,
        new=replace(stale, priority="urgent"),
        actor_id=seed.member_id,
    )

    contents = sorted(
        activity.content
        for activity in ActivityRepository(session).list_for_task(task.id)
        if activity.type == "priority_changed"
    )
    assert contents == [
        "changed the priority from Low to High",
        "changed the priority from Low to Urgent",
    ]


def test_import_publishes_created_per_task(session, seed, bus):
    imported = import_tasks(
        session,
        bus,
        project_id=seed.project_id,
        actor_id=seed.owner_id,
        tasks=[{"title": "One"}, {"title": "Two", "user_id": seed.member_id}],
    )

    assert [task.number for task in imported] == [1, 2]
    activities = ActivityRepository(session).list_for_task(imported[0].id)
    assert [activity.content for activity in activities] == ["imported the task"]
    notifications = NotificationRepository(session).list_for_user(seed.member_id)
    assert [notification.resource_id for notification in notifications] == [imported[1].id]


def test_board_groups_tasks_by_status(session, seed, recorded):
    bus, _ = recorded
    for title, status in (("A", "to-do"), ("B", "done"), ("C", "planned"), ("D", "archived")):
        create_task(
            session, bus, project_id=seed.project_id, title=title, actor_id=None, status=status
        )

    board = get_project_board(session, seed.project_id)

    assert [column.id for column in board.columns] == ["to-do", "in-progress", "in-review", "done"]
    assert board.columns[0].name == "To Do"
    assert [task.title for task in board.columns[0].tasks] == ["A"]
    assert [task.title for task in board.columns[3].tasks] == ["B"]
    assert [task.title for task in board.planned_tasks] == ["C"]
    assert [task.title for task in board.archived_tasks] == ["D"]
