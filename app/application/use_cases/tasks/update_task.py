"""Use cases for updating tasks.

The full update and every single-field update share one path: read the
current task, write the new values, then publish one event per field that
actually changed.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from app.application.event_bus import EventBus
from app.domain.entities import Task
from app.infrastructure.repositories import ProjectRepository, TaskRepository, UserRepository

from .publish_changes import publish_task_changes


def _apply_task_update(
    session: Session,
    bus: EventBus,
    *,
    task_id: str,
    actor_id: str | None,
    **values: Any,
) -> Task:
    repository = TaskRepository(session)
    current = repository.get(task_id)
    if current is None:
        raise ValueError("Task not found")

    if "project_id" in values and values["project_id"] != current.project_id:
        if ProjectRepository(session).get(values["project_id"]) is None:
            raise ValueError("Project not found")

    if "user_id" in values:
        values["user_id"] = values["user_id"] or None
        if values["user_id"] and UserRepository(session).get(values["user_id"]) is None:
            raise ValueError("User not found")

    saved = repository.update(replace(current, **values))
    publish_task_changes(session, bus, old=current, new=saved, actor_id=actor_id)
    return saved


def update_task(
    session: Session,
    bus: EventBus,
    *,
    task_id: str,
    actor_id: str | None,
    title: str,
    description: str,
    status: str,
    priority: str,
    project_id: str,
    position: int,
    due_date: datetime | None = None,
    user_id: str | None = None,
) -> Task:
    """Replace every editable field of the task.

    Omitting ``due_date`` or ``user_id`` clears them.
    """

    return _apply_task_update(
        session,
        bus,
        task_id=task_id,
        actor_id=actor_id,
        title=title,
        description=description,
        status=status,
        priority=priority,
        project_id=project_id,
        position=position,
        due_date=due_date,
        user_id=user_id,
    )


def update_task_status(
    session: Session, bus: EventBus, *, task_id: str, actor_id: str | None, status: str
) -> Task:
    return _apply_task_update(session, bus, task_id=task_id, actor_id=actor_id, status=status)


def update_task_priority(
    session: Session, bus: EventBus, *, task_id: str, actor_id: str | None, priority: str
) -> Task:
    return _apply_task_update(
        session, bus, task_id=task_id, actor_id=actor_id, priority=priority
    )


def update_task_assignee(
    session: Session,
    bus: EventBus,
    *,
    task_id: str,
    actor_id: str | None,
    user_id: str | None,
) -> Task:
    """Assign the task to ``user_id``; an empty value unassigns it."""

    return _apply_task_update(
        session, bus, task_id=task_id, actor_id=actor_id, user_id=user_id
    )


def update_task_due_date(
    session: Session,
    bus: EventBus,
    *,
    task_id: str,
    actor_id: str | None,
    due_date: datetime | None,
) -> Task:
    return _apply_task_update(
        session, bus, task_id=task_id, actor_id=actor_id, due_date=due_date
    )


def update_task_title(
    session: Session, bus: EventBus, *, task_id: str, actor_id: str | None, title: str
) -> Task:
    return _apply_task_update(session, bus, task_id=task_id, actor_id=actor_id, title=title)


def update_task_description(
    session: Session,
    bus: EventBus,
    *,
    task_id: str,
    actor_id: str | None,
    description: str,
) -> Task:
    return _apply_task_update(
        session, bus, task_id=task_id, actor_id=actor_id, description=description
    )


__all__ = [
    "update_task",
    "update_task_assignee",
    "update_task_description",
    "update_task_due_date",
    "update_task_priority",
    "update_task_status",
    "update_task_title",
]
