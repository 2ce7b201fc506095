"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationCreate(BaseModel):
    """Payload used to create a notification for a user."""

    user_id: str
    title: str = Field(..., min_length=1)
    content: str | None = None
    type: str = "info"
    resource_id: str | None = None
    resource_type: str | None = None


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: str
    user_id: str
    title: str
    content: str | None
    type: str
    is_read: bool
    resource_id: str | None = None
    resource_type: str | None = None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class NotificationCountResponse(BaseModel):
    count: int


__all__ = ["NotificationCountResponse", "NotificationCreate", "NotificationRead"]
