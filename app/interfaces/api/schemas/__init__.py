from .activity import (
    ActivityCreate,
    ActivityFeedRead,
    ActivityRead,
    CommentCreate,
    CommentDelete,
    CommentUpdate,
)
from .config import HealthRead, PublicConfigRead
from .label import LabelCreate, LabelRead, LabelUpdate
from .notification import NotificationCountResponse, NotificationCreate, NotificationRead
from .project import ProjectCreate, ProjectRead, ProjectUpdate
from .search import SearchResultsRead
from .task import (
    BoardColumnRead,
    ProjectBoardRead,
    TaskAssigneeUpdate,
    TaskCreate,
    TaskDescriptionUpdate,
    TaskDueDateUpdate,
    TaskExportRead,
    TaskImportItem,
    TaskImportRequest,
    TaskImportResponse,
    TaskPriorityUpdate,
    TaskRead,
    TaskStatusUpdate,
    TaskTitleUpdate,
    TaskUpdate,
)

__all__ = [
    "ActivityCreate",
    "ActivityFeedRead",
    "ActivityRead",
    "CommentCreate",
    "CommentDelete",
    "CommentUpdate",
    "HealthRead",
    "PublicConfigRead",
    "LabelCreate",
    "LabelRead",
    "LabelUpdate",
    "NotificationCountResponse",
    "NotificationCreate",
    "NotificationRead",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "SearchResultsRead",
    "BoardColumnRead",
    "ProjectBoardRead",
    "TaskAssigneeUpdate",
    "TaskCreate",
    "TaskDescriptionUpdate",
    "TaskDueDateUpdate",
    "TaskExportRead",
    "TaskImportItem",
    "TaskImportRequest",
    "TaskImportResponse",
    "TaskPriorityUpdate",
    "TaskRead",
    "TaskStatusUpdate",
    "TaskTitleUpdate",
    "TaskUpdate",
]
