"""Use cases for persisting and managing user notifications."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.notifications import dispatch_notification
from app.infrastructure.repositories import NotificationRepository


def create_notification(
    session: Session,
    *,
    user_id: str,
    title: str,
    content: str | None = None,
    type: str = "info",
    resource_id: str | None = None,
    resource_type: str | None = None,
) -> Notification:
    """Persist a notification and push it to the user's open connections."""

    saved = NotificationRepository(session).create(
        Notification(
            id=None,
            user_id=user_id,
            title=title,
            content=content,
            type=type,
            is_read=False,
            resource_id=resource_id,
            resource_type=resource_type,
        )
    )
    dispatch_notification(saved)
    return saved


def list_notifications(session: Session, *, user_id: str) -> Sequence[Notification]:
    return NotificationRepository(session).list_for_user(user_id, limit=None)


def mark_notification_as_read(
    session: Session, *, notification_id: str, user_id: str
) -> Notification:
    """Flag one of ``user_id``'s notifications as read or raise an error."""

    notification = NotificationRepository(session).mark_as_read(
        notification_id, user_id=user_id
    )
    if notification is None:
        raise ValueError("Notification not found")
    return notification


def mark_all_notifications_as_read(session: Session, *, user_id: str) -> int:
    return NotificationRepository(session).mark_all_as_read(user_id)


def clear_notifications(session: Session, *, user_id: str) -> int:
    return NotificationRepository(session).clear_all(user_id)


__all__ = [
    "clear_notifications",
    "create_notification",
    "list_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
]
