"""Use case for appending an entry to a task's activity log."""

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.infrastructure.repositories import ActivityRepository, TaskRepository


def create_activity(
    session: Session,
    *,
    task_id: str,
    type: str,
    user_id: str | None,
    content: str | None,
) -> Activity:
    """Persist an activity for ``task_id``; the task must exist."""

    if TaskRepository(session).get(task_id) is None:
        raise ValueError("Task not found")

    return ActivityRepository(session).create(
        Activity(
            id=None,
            task_id=task_id,
            type=type,
            user_id=user_id,
            content=content,
        )
    )


__all__ = ["create_activity"]
