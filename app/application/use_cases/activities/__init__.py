"""Use cases for task activities and comments."""

from .comments import create_comment, delete_comment, update_comment
from .create_activity import create_activity
from .list_activities import list_activity_feed, list_task_activities

__all__ = [
    "create_activity",
    "create_comment",
    "delete_comment",
    "list_activity_feed",
    "list_task_activities",
    "update_comment",
]
