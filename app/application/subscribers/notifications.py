"""Notify users affected by assignment changes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from sqlalchemy.orm import Session

from app.application.event_bus import EventBus
from app.application.use_cases.notifications import create_notification
from app.domain.events import (
    TASK_ASSIGNEE_CHANGED,
    TASK_CREATED,
    TASK_UNASSIGNED,
    DomainEvent,
)

NOTIFICATION_TYPE_TASK_ASSIGNED = "task_assigned"
NOTIFICATION_TYPE_TASK_UNASSIGNED = "task_unassigned"
RESOURCE_TYPE_TASK = "task"


@dataclass(frozen=True)
class NotificationDraft:
    """Notification about to be persisted for ``user_id``."""

    user_id: str
    title: str
    content: str
    type: str


def draft_notification(event: DomainEvent) -> NotificationDraft | None:
    """Return the notification ``event`` produces, if any."""

    payload = event.payload
    task_title = payload.get("title") or "a task"

    if event.name in (TASK_ASSIGNEE_CHANGED, TASK_CREATED):
        recipient = (
            payload.get("new_assignee")
            if event.name == TASK_ASSIGNEE_CHANGED
            else payload.get("assignee")
        )
        if not recipient:
            return None
        return NotificationDraft(
            user_id=recipient,
            title="New task assigned",
            content=f'You were assigned to "{task_title}"',
            type=NOTIFICATION_TYPE_TASK_ASSIGNED,
        )

    if event.name == TASK_UNASSIGNED:
        recipient = payload.get("old_assignee")
        if not recipient:
            return None
        return NotificationDraft(
            user_id=recipient,
            title="Task unassigned",
            content=f'You were unassigned from "{task_title}"',
            type=NOTIFICATION_TYPE_TASK_UNASSIGNED,
        )

    return None


def make_notification_handler(
    session_factory: Callable[[], Session],
) -> Callable[[DomainEvent], None]:
    """Return a bus handler persisting the notification drafted for an event."""

    def notify_affected_user(event: DomainEvent) -> None:
        draft = draft_notification(event)
        if draft is None:
            return

        session = session_factory()
        try:
            create_notification(
                session,
                user_id=draft.user_id,
                title=draft.title,
                content=draft.content,
                type=draft.type,
                resource_id=event.task_id,
                resource_type=RESOURCE_TYPE_TASK,
            )
        finally:
            session.close()

    return notify_affected_user


def register_notification_subscribers(
    bus: EventBus, session_factory: Callable[[], Session]
) -> None:
    handler = make_notification_handler(session_factory)
    for event_name in (TASK_CREATED, TASK_ASSIGNEE_CHANGED, TASK_UNASSIGNED):
        bus.subscribe(event_name, handler)


__all__ = [
    "NotificationDraft",
    "draft_notification",
    "make_notification_handler",
    "register_notification_subscribers",
]
