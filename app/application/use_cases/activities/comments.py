"""Use cases for task comments.

Comments are stored as activities of type ``comment``. They are written
directly by their endpoints rather than through the event bus, and only their
author may edit or delete them.
"""

from sqlalchemy.orm import Session

from app.domain.entities import ACTIVITY_TYPE_COMMENT, Activity
from app.infrastructure.repositories import ActivityRepository

from .create_activity import create_activity


def create_comment(
    session: Session, *, task_id: str, user_id: str, content: str
) -> Activity:
    return create_activity(
        session,
        task_id=task_id,
        type=ACTIVITY_TYPE_COMMENT,
        user_id=user_id,
        content=content,
    )


def _get_own_comment(
    repository: ActivityRepository, *, activity_id: str, user_id: str
) -> Activity:
    activity = repository.get(activity_id)
    if activity is None or not activity.is_comment():
        raise ValueError("Comment not found")
    if activity.user_id != user_id:
        raise PermissionError("You can only modify your own comments")
    return activity


def update_comment(
    session: Session, *, activity_id: str, user_id: str, content: str
) -> Activity:
    repository = ActivityRepository(session)
    _get_own_comment(repository, activity_id=activity_id, user_id=user_id)
    return repository.update_content(activity_id, content)


def delete_comment(session: Session, *, activity_id: str, user_id: str) -> None:
    repository = ActivityRepository(session)
    _get_own_comment(repository, activity_id=activity_id, user_id=user_id)
    repository.delete(activity_id)


__all__ = ["create_comment", "delete_comment", "update_comment"]
