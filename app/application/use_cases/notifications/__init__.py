"""Public helpers for creating and managing notifications."""

from .notifications import (
    clear_notifications,
    create_notification,
    list_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
)

__all__ = [
    "clear_notifications",
    "create_notification",
    "list_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
]
