"""Schemas for label endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LabelCreate(BaseModel):
    name: str = Field(..., min_length=1)
    color: str
    workspace_id: str
    task_id: str | None = None


class LabelUpdate(BaseModel):
    name: str = Field(..., min_length=1)
    color: str


class LabelRead(BaseModel):
    id: str
    name: str
    color: str
    workspace_id: str
    task_id: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["LabelCreate", "LabelRead", "LabelUpdate"]
