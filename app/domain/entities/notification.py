"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: str | None
    user_id: str
    title: str
    content: str | None
    type: str
    is_read: bool = False
    resource_id: str | None = None
    resource_type: str | None = None
    created_at: datetime | None = None


__all__ = ["Notification"]
