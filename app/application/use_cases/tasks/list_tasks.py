"""Use cases for listing tasks by project board or workspace."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import (
    BOARD_COLUMNS,
    TASK_STATUS_ARCHIVED,
    TASK_STATUS_PLANNED,
    Project,
    Task,
)
from app.infrastructure.repositories import (
    MembershipRepository,
    ProjectRepository,
    TaskRepository,
)
from app.utils import to_normal_case


@dataclass
class BoardColumn:
    id: str
    name: str
    tasks: list[Task] = field(default_factory=list)


@dataclass
class ProjectBoard:
    """A project's tasks grouped by status."""

    project: Project
    columns: list[BoardColumn]
    planned_tasks: list[Task]
    archived_tasks: list[Task]


def build_board(project: Project, tasks: Sequence[Task]) -> ProjectBoard:
    columns = {
        status: BoardColumn(id=status, name=to_normal_case(status))
        for status in BOARD_COLUMNS
    }
    planned: list[Task] = []
    archived: list[Task] = []
    for task in tasks:
        if task.status == TASK_STATUS_PLANNED:
            planned.append(task)
        elif task.status == TASK_STATUS_ARCHIVED:
            archived.append(task)
        elif task.status in columns:
            columns[task.status].tasks.append(task)
        else:
            columns.setdefault(
                task.status, BoardColumn(id=task.status, name=to_normal_case(task.status))
            ).tasks.append(task)
    return ProjectBoard(
        project=project,
        columns=list(columns.values()),
        planned_tasks=planned,
        archived_tasks=archived,
    )


def get_project_board(session: Session, project_id: str) -> ProjectBoard:
    """Return the board for ``project_id`` or raise an error."""

    project = ProjectRepository(session).get(project_id)
    if project is None:
        raise ValueError("Project not found")
    return build_board(project, TaskRepository(session).list_by_project(project_id))


def list_workspace_tasks(
    session: Session,
    *,
    workspace_id: str,
    requesting_user_id: str,
    project_id: str | None = None,
    user_id: str | None = None,
    status: str | None = None,
    labels: Sequence[str] | None = None,
    minimum_due_date: datetime | None = None,
    maximum_due_date: datetime | None = None,
) -> Sequence[Task]:
    """Return the workspace's tasks matching every provided filter."""

    if not MembershipRepository(session).is_member(workspace_id, requesting_user_id):
        raise PermissionError("You do not have access to this workspace")

    return TaskRepository(session).list_by_workspace(
        workspace_id,
        project_id=project_id,
        user_id=user_id,
        status=status,
        labels=labels,
        minimum_due_date=minimum_due_date,
        maximum_due_date=maximum_due_date,
    )


__all__ = [
    "BoardColumn",
    "ProjectBoard",
    "build_board",
    "get_project_board",
    "list_workspace_tasks",
]
