"""Domain entity representing a task on a project board."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

TASK_STATUS_PLANNED = "planned"
TASK_STATUS_TO_DO = "to-do"
TASK_STATUS_IN_PROGRESS = "in-progress"
TASK_STATUS_IN_REVIEW = "in-review"
TASK_STATUS_DONE = "done"
TASK_STATUS_ARCHIVED = "archived"

BOARD_COLUMNS = (
    TASK_STATUS_TO_DO,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_IN_REVIEW,
    TASK_STATUS_DONE,
)

TASK_PRIORITIES = ("no-priority", "low", "medium", "high", "urgent")
DEFAULT_TASK_PRIORITY = "low"


@dataclass
class Task:
    """Unit of work tracked inside a project."""

    id: str | None
    project_id: str
    title: str
    description: str
    status: str
    priority: str
    due_date: datetime | None
    user_id: str | None
    position: int
    number: int | None = None
    created_at: datetime | None = None

    @property
    def assignee_id(self) -> str | None:
        """Return the assignee with empty strings normalised to ``None``."""

        return self.user_id or None


__all__ = [
    "BOARD_COLUMNS",
    "DEFAULT_TASK_PRIORITY",
    "TASK_PRIORITIES",
    "TASK_STATUS_ARCHIVED",
    "TASK_STATUS_DONE",
    "TASK_STATUS_IN_PROGRESS",
    "TASK_STATUS_IN_REVIEW",
    "TASK_STATUS_PLANNED",
    "TASK_STATUS_TO_DO",
    "Task",
]
