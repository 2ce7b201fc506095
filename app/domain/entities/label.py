"""Domain entity for task labels."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Label:
    """Coloured tag defined in a workspace and optionally attached to a task."""

    id: str | None
    name: str
    color: str
    workspace_id: str
    task_id: str | None = None
    created_at: datetime | None = None


__all__ = ["Label"]
