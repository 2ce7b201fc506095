"""Domain entity representing a project inside a workspace."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Project:
    """Collection of tasks owned by a workspace."""

    id: str | None
    workspace_id: str
    name: str
    slug: str
    icon: str = "Layout"
    description: str | None = None
    is_public: bool = False
    created_at: datetime | None = None


__all__ = ["Project"]
