"""Schemas for project endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProjectCreate(BaseModel):
    workspace_id: str
    name: str = Field(..., min_length=1)
    icon: str = "Layout"
    slug: str | None = None


class ProjectUpdate(BaseModel):
    name: str = Field(..., min_length=1)
    icon: str = "Layout"
    slug: str
    description: str | None = None
    is_public: bool = False


class ProjectRead(BaseModel):
    id: str
    workspace_id: str
    name: str
    slug: str
    icon: str
    description: str | None
    is_public: bool
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ProjectCreate", "ProjectRead", "ProjectUpdate"]
