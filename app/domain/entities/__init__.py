"""Domain entities exposed by the application."""

from .activity import ACTIVITY_TYPE_COMMENT, Activity, ActivityFeedItem
from .label import Label
from .notification import Notification
from .project import Project
from .task import (
    BOARD_COLUMNS,
    DEFAULT_TASK_PRIORITY,
    TASK_PRIORITIES,
    TASK_STATUS_ARCHIVED,
    TASK_STATUS_DONE,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_IN_REVIEW,
    TASK_STATUS_PLANNED,
    TASK_STATUS_TO_DO,
    Task,
)
from .user import Member, User, Workspace

__all__ = [
    "ACTIVITY_TYPE_COMMENT",
    "Activity",
    "ActivityFeedItem",
    "BOARD_COLUMNS",
    "DEFAULT_TASK_PRIORITY",
    "Label",
    "Member",
    "Notification",
    "Project",
    "TASK_PRIORITIES",
    "TASK_STATUS_ARCHIVED",
    "TASK_STATUS_DONE",
    "TASK_STATUS_IN_PROGRESS",
    "TASK_STATUS_IN_REVIEW",
    "TASK_STATUS_PLANNED",
    "TASK_STATUS_TO_DO",
    "Task",
    "User",
    "Workspace",
]
