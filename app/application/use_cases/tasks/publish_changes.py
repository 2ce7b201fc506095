"""Publish the domain events describing a committed task update."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.event_bus import EventBus
from app.domain.entities import Task
from app.domain.events import DomainEvent
from app.domain.task_changes import build_task_events, diff_task, requires_assignee_name
from app.infrastructure.repositories import (
    MembershipRepository,
    ProjectRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


def resolve_assignee_name(session: Session, task: Task) -> str | None:
    """Return the display name of ``task``'s assignee within its workspace."""

    assignee_id = task.assignee_id
    if assignee_id is None:
        return None

    project = ProjectRepository(session).get(task.project_id)
    if project is not None:
        for member in MembershipRepository(session).list_members(project.workspace_id):
            if member.user_id == assignee_id:
                return member.name

    user = UserRepository(session).get(assignee_id)
    return user.name if user else None


def publish_task_changes(
    session: Session,
    bus: EventBus,
    *,
    old: Task,
    new: Task,
    actor_id: str | None,
) -> list[DomainEvent]:
    """Diff ``old`` against ``new`` and publish one event per changed field.

    Must be called after ``new`` is committed. Nothing is published when the
    update did not change any tracked field.
    """

    changes = diff_task(old, new)
    if not changes:
        return []

    assignee_name = None
    if requires_assignee_name(changes):
        try:
            assignee_name = resolve_assignee_name(session, new)
        except SQLAlchemyError:
            logger.exception("Could not resolve assignee name for task %s", new.id)

    events = build_task_events(
        new, changes, actor_id=actor_id, assignee_name=assignee_name
    )
    bus.publish_all(events)
    return events


__all__ = ["publish_task_changes", "resolve_assignee_name"]
