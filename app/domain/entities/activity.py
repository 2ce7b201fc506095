"""Domain entity describing an entry of a task's activity log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

ACTIVITY_TYPE_COMMENT = "comment"


@dataclass
class Activity:
    """Audit entry or comment attached to a task."""

    id: str | None
    task_id: str
    type: str
    user_id: str | None
    content: str | None
    created_at: datetime | None = None

    def is_comment(self) -> bool:
        return self.type == ACTIVITY_TYPE_COMMENT


@dataclass
class ActivityFeedItem:
    """Activity enriched with task, project, workspace and author details."""

    activity: Activity
    task_title: str | None
    task_number: int | None
    project_id: str | None
    project_name: str | None
    project_slug: str | None
    workspace_id: str | None
    workspace_name: str | None
    user_name: str | None
    user_email: str | None


__all__ = ["ACTIVITY_TYPE_COMMENT", "Activity", "ActivityFeedItem"]
