"""Use case for creating tasks."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from app.application.event_bus import EventBus
from app.domain.entities import DEFAULT_TASK_PRIORITY, TASK_STATUS_TO_DO, Task
from app.domain.events import TASK_CREATED, DomainEvent
from app.infrastructure.repositories import ProjectRepository, TaskRepository, UserRepository

CREATED_CONTENT = "created the task"


def create_task(
    session: Session,
    bus: EventBus,
    *,
    project_id: str,
    title: str,
    actor_id: str | None,
    description: str = "",
    status: str | None = None,
    priority: str | None = None,
    due_date: datetime | None = None,
    user_id: str | None = None,
    content: str = CREATED_CONTENT,
) -> Task:
    """Create a task at the bottom of its column and publish ``task.created``."""

    if ProjectRepository(session).get(project_id) is None:
        raise ValueError("Project not found")
    if user_id and UserRepository(session).get(user_id) is None:
        raise ValueError("User not found")

    repository = TaskRepository(session)
    status = status or TASK_STATUS_TO_DO
    task = repository.create(
        Task(
            id=None,
            project_id=project_id,
            number=repository.next_number(project_id),
            title=title,
            description=description or "",
            status=status,
            priority=priority or DEFAULT_TASK_PRIORITY,
            due_date=due_date,
            user_id=user_id or None,
            position=repository.next_position(project_id, status),
        )
    )

    bus.publish(
        DomainEvent.for_task(
            TASK_CREATED,
            task_id=task.id,
            user_id=actor_id,
            title=task.title,
            content=content,
            assignee=task.assignee_id,
        )
    )
    return task


__all__ = ["CREATED_CONTENT", "create_task"]
