"""Aggregate application use cases."""

from .activities import create_comment, list_activity_feed
from .notifications import create_notification
from .tasks import create_task, publish_task_changes, update_task

__all__ = [
    "create_comment",
    "create_notification",
    "create_task",
    "list_activity_feed",
    "publish_task_changes",
    "update_task",
]
