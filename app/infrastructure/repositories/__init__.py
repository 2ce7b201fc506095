"""Repository implementations for infrastructure layer."""

from .activity_repository import ActivityRepository
from .label_repository import LabelRepository
from .notification_repository import NotificationRepository
from .project_repository import ProjectRepository
from .task_repository import TaskRepository
from .user_repository import MembershipRepository, UserRepository

__all__ = [
    "ActivityRepository",
    "LabelRepository",
    "MembershipRepository",
    "NotificationRepository",
    "ProjectRepository",
    "TaskRepository",
    "UserRepository",
]
