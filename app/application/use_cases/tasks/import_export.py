"""Use cases to export a project's tasks and import them back."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from app.application.event_bus import EventBus
from app.domain.entities import Task
from app.infrastructure.repositories import ProjectRepository, TaskRepository
from app.utils import now_in_app_timezone

from .create_task import create_task

IMPORTED_CONTENT = "imported the task"


def export_tasks(session: Session, project_id: str) -> tuple[str, list[Task], datetime]:
    """Return the project name, its tasks and the export timestamp."""

    project = ProjectRepository(session).get(project_id)
    if project is None:
        raise ValueError("Project not found")
    tasks = list(TaskRepository(session).list_by_project(project_id))
    return project.name, tasks, now_in_app_timezone()


def import_tasks(
    session: Session,
    bus: EventBus,
    *,
    project_id: str,
    actor_id: str | None,
    tasks: Iterable[Mapping[str, Any]],
) -> list[Task]:
    """Create every task in ``tasks``; each one publishes ``task.created``."""

    if ProjectRepository(session).get(project_id) is None:
        raise ValueError("Project not found")

    created: list[Task] = []
    for entry in tasks:
        created.append(
            create_task(
                session,
                bus,
                project_id=project_id,
                actor_id=actor_id,
                title=entry["title"],
                description=entry.get("description") or "",
                status=entry.get("status"),
                priority=entry.get("priority"),
                due_date=entry.get("due_date"),
                user_id=entry.get("user_id"),
                content=IMPORTED_CONTENT,
            )
        )
    return created


__all__ = ["IMPORTED_CONTENT", "export_tasks", "import_tasks"]
