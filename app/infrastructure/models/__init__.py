"""ORM models used by the application infrastructure."""

from .activity import ActivityModel
from .label import LabelModel
from .notification import NotificationModel
from .project import ProjectModel
from .task import TaskModel
from .user import UserModel, WorkspaceMemberModel, WorkspaceModel

__all__ = [
    "ActivityModel",
    "LabelModel",
    "NotificationModel",
    "ProjectModel",
    "TaskModel",
    "UserModel",
    "WorkspaceMemberModel",
    "WorkspaceModel",
]
