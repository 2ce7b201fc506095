"""Schemas for task endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import DEFAULT_TASK_PRIORITY, TASK_STATUS_TO_DO


class TaskCreate(BaseModel):
    """Payload required to create a task inside a project."""

    title: str = Field(..., min_length=1)
    description: str = ""
    status: str = TASK_STATUS_TO_DO
    priority: str = DEFAULT_TASK_PRIORITY
    due_date: datetime | None = None
    user_id: str | None = None


class TaskUpdate(BaseModel):
    """Full replacement of a task's editable fields.

    Leaving ``due_date`` or ``user_id`` out clears them.
    """

    title: str = Field(..., min_length=1)
    description: str = ""
    status: str
    priority: str
    project_id: str
    position: int = 0
    due_date: datetime | None = None
    user_id: str | None = None


class TaskStatusUpdate(BaseModel):
    status: str


class TaskPriorityUpdate(BaseModel):
    priority: str


class TaskAssigneeUpdate(BaseModel):
    user_id: str | None = None


class TaskDueDateUpdate(BaseModel):
    due_date: datetime | None = None


class TaskTitleUpdate(BaseModel):
    title: str = Field(..., min_length=1)


class TaskDescriptionUpdate(BaseModel):
    description: str


class TaskRead(BaseModel):
    id: str
    project_id: str
    number: int | None
    title: str
    description: str
    status: str
    priority: str
    due_date: datetime | None
    user_id: str | None
    position: int
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class BoardColumnRead(BaseModel):
    id: str
    name: str
    tasks: list[TaskRead]


class ProjectBoardRead(BaseModel):
    """A project with its tasks grouped by board column."""

    id: str
    name: str
    slug: str
    icon: str
    description: str | None
    is_public: bool
    workspace_id: str
    columns: list[BoardColumnRead]
    planned_tasks: list[TaskRead]
    archived_tasks: list[TaskRead]


class TaskImportItem(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    status: str | None = None
    priority: str | None = None
    due_date: datetime | None = None
    user_id: str | None = None


class TaskImportRequest(BaseModel):
    tasks: list[TaskImportItem]


class TaskImportResponse(BaseModel):
    imported: int
    tasks: list[TaskRead]


class TaskExportRead(BaseModel):
    project: str
    exported_at: datetime
    tasks: list[TaskRead]


__all__ = [
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
