"""Tests for the activity writer and notification dispatcher."""

from __future__ import annotations

from app.application.event_bus import EventBus
from app.application.subscribers import draft_notification, render_activity_content
from app.application.subscribers.activity import make_activity_handler
from app.domain.events import (
    TASK_ASSIGNEE_CHANGED,
    TASK_CREATED,
    TASK_DESCRIPTION_CHANGED,
    TASK_DUE_DATE_CHANGED,
    TASK_PRIORITY_CHANGED,
    TASK_STATUS_CHANGED,
    TASK_TITLE_CHANGED,
    TASK_UNASSIGNED,
    DomainEvent,
)
from app.infrastructure import database
from app.infrastructure.models import TaskModel
from app.infrastructure.repositories import ActivityRepository


def _event(name: str, actor: str | None = "user-1", **fields) -> DomainEvent:
    return DomainEvent.for_task(name, task_id="task-1", user_id=actor, title="Fix login", **fields)


def test_status_content_uses_normal_case():
    event = _event(TASK_STATUS_CHANGED, old_status="to-do", new_status="in-progress")

    assert render_activity_content(event) == "changed the status from To Do to In Progress"


def test_priority_content():
    event = _event(TASK_PRIORITY_CHANGED, old_priority="low", new_priority="high")

    assert render_activity_content(event) == "changed the priority from Low to High"


def test_assignee_content_falls_back_to_unknown_user():
    named = _event(TASK_ASSIGNEE_CHANGED, new_assignee="u2", new_assignee_name="Grace Hopper")
    unnamed = _event(TASK_ASSIGNEE_CHANGED, new_assignee="u2", new_assignee_name=None)

    assert render_activity_content(named) == "assigned the task to Grace Hopper"
    assert render_activity_content(unnamed) == "assigned the task to an unknown user"


def test_due_date_content():
    changed = _event(TASK_DUE_DATE_CHANGED, old_due_date=None, new_due_date="2025-03-05T10:00:00Z")
    removed = _event(TASK_DUE_DATE_CHANGED, old_due_date="2025-03-05T10:00:00Z", new_due_date=None)

    assert render_activity_content(changed) == "changed the due date to Mar 5"
    assert render_activity_content(removed) == "removed the due date"


def test_remaining_content_templates():
    assert render_activity_content(_event(TASK_CREATED, content="created the task")) == (
        "created the task"
    )
    assert render_activity_content(_event(TASK_UNASSIGNED, old_assignee="u2")) == (
        "unassigned the task"
    )
    assert render_activity_content(
        _event(TASK_TITLE_CHANGED, old_title="Fix login", new_title="Fix sign in")
    ) == 'changed the title from "Fix login" to "Fix sign in"'
    assert render_activity_content(_event(TASK_DESCRIPTION_CHANGED)) == "updated the description"


def test_activity_handler_skips_events_without_actor(seed):
    db = database.SessionLocal()
    try:
        task = TaskModel(
            project_id=seed.project_id, title="Fix login", status="to-do", number=1
        )
        db.add(task)
        db.commit()
        task_id = task.id
    finally:
        db.close()

    bus = EventBus()
    bus.subscribe(TASK_STATUS_CHANGED, make_activity_handler(database.SessionLocal))
    system_event = DomainEvent.for_task(
        TASK_STATUS_CHANGED,
        task_id=task_id,
        user_id=None,
        title="Fix login",
        old_status="to-do",
        new_status="done",
    )
    user_event = DomainEvent.for_task(
        TASK_STATUS_CHANGED,
        task_id=task_id,
        user_id=seed.owner_id,
        title="Fix login",
        old_status="to-do",
        new_status="done",
    )

    assert bus.publish(system_event) == 0
    assert bus.publish(user_event) == 0

    db = database.SessionLocal()
    try:
        activities = ActivityRepository(db).list_for_task(task_id)
    finally:
        db.close()
    assert [activity.type for activity in activities] == ["status_changed"]
    assert activities[0].user_id == seed.owner_id
    assert activities[0].content == "changed the status from To Do to Done"


def test_assignment_notifies_the_new_assignee():
    draft = draft_notification(
        _event(TASK_ASSIGNEE_CHANGED, old_assignee=None, new_assignee="u2", new_assignee_name="G")
    )

    assert draft is not None
    assert draft.user_id == "u2"
    assert draft.title == "New task assigned"
    assert draft.content == 'You were assigned to "Fix login"'
    assert draft.type == "task_assigned"


def test_self_assignment_still_notifies():
    draft = draft_notification(
        _event(TASK_ASSIGNEE_CHANGED, actor="u2", new_assignee="u2", new_assignee_name="G")
    )

    assert draft is not None
    assert draft.user_id == "u2"


def test_created_task_notifies_only_with_assignee():
    assert draft_notification(_event(TASK_CREATED, content="created the task", assignee=None)) is None

    draft = draft_notification(_event(TASK_CREATED, content="created the task", assignee="u2"))
    assert draft is not None
    assert draft.user_id == "u2"


def test_unassignment_notifies_the_previous_assignee():
    draft = draft_notification(_event(TASK_UNASSIGNED, old_assignee="u2"))

    assert draft is not None
    assert draft.user_id == "u2"
    assert draft.type == "task_unassigned"


def test_other_events_do_not_notify():
    event = _event(TASK_STATUS_CHANGED, old_status="to-do", new_status="done")

    assert draft_notification(event) is None
