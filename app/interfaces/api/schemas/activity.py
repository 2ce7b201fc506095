"""Pydantic schemas for activity and comment endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ActivityRead(BaseModel):
    id: str
    task_id: str
    type: str
    user_id: str | None
    content: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ActivityFeedRead(ActivityRead):
    """Activity enriched with the task, project and author it refers to."""

    task_title: str | None = None
    task_number: int | None = None
    project_id: str | None = None
    project_name: str | None = None
    project_slug: str | None = None
    workspace_id: str | None = None
    workspace_name: str | None = None
    user_name: str | None = None
    user_email: str | None = None


class ActivityCreate(BaseModel):
    task_id: str
    type: str = Field(..., min_length=1)
    content: str


class CommentCreate(BaseModel):
    task_id: str
    content: str = Field(..., min_length=1)


class CommentUpdate(BaseModel):
    id: str
    content: str = Field(..., min_length=1)


class CommentDelete(BaseModel):
    id: str


__all__ = [
    "ActivityCreate",
    "ActivityFeedRead",
    "ActivityRead",
    "CommentCreate",
    "CommentDelete",
    "CommentUpdate",
]
