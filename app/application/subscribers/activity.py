"""Record an activity log entry for every task event."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from sqlalchemy.orm import Session

from app.application.event_bus import EventBus
from app.application.use_cases.activities import create_activity
from app.domain.events import (
    TASK_ASSIGNEE_CHANGED,
    TASK_CREATED,
    TASK_DESCRIPTION_CHANGED,
    TASK_DUE_DATE_CHANGED,
    TASK_EVENTS,
    TASK_PRIORITY_CHANGED,
    TASK_STATUS_CHANGED,
    TASK_TITLE_CHANGED,
    TASK_UNASSIGNED,
    DomainEvent,
)
from app.utils import ensure_app_timezone, format_short_date, to_normal_case

logger = logging.getLogger(__name__)

UNKNOWN_ASSIGNEE = "an unknown user"


def _render_due_date(value: str | None) -> str:
    if not value:
        return "removed the due date"
    due_date = ensure_app_timezone(datetime.fromisoformat(value.replace("Z", "+00:00")))
    return f"changed the due date to {format_short_date(due_date)}"


def render_activity_content(event: DomainEvent) -> str | None:
    """Return the sentence recorded for ``event``, or ``None`` to skip it."""

    payload = event.payload
    if event.name == TASK_CREATED:
        return payload.get("content") or None
    if event.name == TASK_STATUS_CHANGED:
        return (
            f"changed the status from {to_normal_case(payload.get('old_status'))} "
            f"to {to_normal_case(payload.get('new_status'))}"
        )
    if event.name == TASK_PRIORITY_CHANGED:
        return (
            f"changed the priority from {to_normal_case(payload.get('old_priority'))} "
            f"to {to_normal_case(payload.get('new_priority'))}"
        )
    if event.name == TASK_ASSIGNEE_CHANGED:
        name = payload.get("new_assignee_name") or UNKNOWN_ASSIGNEE
        return f"assigned the task to {name}"
    if event.name == TASK_UNASSIGNED:
        return "unassigned the task"
    if event.name == TASK_DUE_DATE_CHANGED:
        return _render_due_date(payload.get("new_due_date"))
    if event.name == TASK_TITLE_CHANGED:
        return (
            f'changed the title from "{payload.get("old_title")}" '
            f'to "{payload.get("new_title")}"'
        )
    if event.name == TASK_DESCRIPTION_CHANGED:
        return "updated the description"
    return None


def make_activity_handler(
    session_factory: Callable[[], Session],
) -> Callable[[DomainEvent], None]:
    """Return a bus handler writing one activity per event in its own session."""

    def record_task_activity(event: DomainEvent) -> None:
        if not event.task_id or not event.actor_id:
            logger.debug("Skipping activity for %s without task or actor", event.name)
            return

        content = render_activity_content(event)
        if content is None:
            return

        session = session_factory()
        try:
            create_activity(
                session,
                task_id=event.task_id,
                type=event.payload["type"],
                user_id=event.actor_id,
                content=content,
            )
        finally:
            session.close()

    return record_task_activity


def register_activity_subscribers(
    bus: EventBus, session_factory: Callable[[], Session]
) -> None:
    handler = make_activity_handler(session_factory)
    for event_name in TASK_EVENTS:
        bus.subscribe(event_name, handler)


__all__ = [
    "make_activity_handler",
    "register_activity_subscribers",
    "render_activity_content",
]
