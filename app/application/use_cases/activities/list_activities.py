"""Use cases for reading activity logs."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import Activity, ActivityFeedItem
from app.infrastructure.repositories import ActivityRepository, MembershipRepository


def list_task_activities(session: Session, task_id: str) -> Sequence[Activity]:
    """Return the activity log of ``task_id``, oldest first."""

    return ActivityRepository(session).list_for_task(task_id)


def list_activity_feed(
    session: Session,
    *,
    requesting_user_id: str,
    workspace_id: str,
    project_id: str | None = None,
    user_id: str | None = None,
    created_after: datetime | None = None,
) -> Sequence[ActivityFeedItem]:
    """Return the workspace activity feed, newest first.

    The requesting user must be a member of ``workspace_id``.
    """

    if not MembershipRepository(session).is_member(workspace_id, requesting_user_id):
        raise PermissionError("You do not have access to this workspace")

    return ActivityRepository(session).list_feed(
        workspace_id=workspace_id,
        project_id=project_id,
        user_id=user_id,
        created_after=created_after,
    )


__all__ = ["list_activity_feed", "list_task_activities"]
