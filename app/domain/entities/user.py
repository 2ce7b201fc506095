"""Domain entities for users and workspace membership.

Accounts, sessions and organisations are owned by the auth service; the API
only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Authenticated account."""

    id: str
    name: str
    email: str
    image: str | None = None
    created_at: datetime | None = None


@dataclass
class Workspace:
    """Tenant grouping projects, members and labels."""

    id: str
    name: str
    slug: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class Member:
    """A user's membership of a workspace."""

    user_id: str
    workspace_id: str
    name: str
    email: str
    role: str = "member"


__all__ = ["Member", "User", "Workspace"]
