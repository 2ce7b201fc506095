"""Workspace wide search over task titles and project names."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import Project, Task
from app.infrastructure.repositories import (
    MembershipRepository,
    ProjectRepository,
    TaskRepository,
)


@dataclass
class SearchResults:
    tasks: list[Task]
    projects: list[Project]


def search_workspace(
    session: Session,
    *,
    workspace_id: str,
    requesting_user_id: str,
    query: str,
    limit: int = 20,
) -> SearchResults:
    if not MembershipRepository(session).is_member(workspace_id, requesting_user_id):
        raise PermissionError("You do not have access to this workspace")

    term = query.strip()
    if not term:
        return SearchResults(tasks=[], projects=[])

    return SearchResults(
        tasks=list(TaskRepository(session).search(workspace_id, term, limit=limit)),
        projects=list(ProjectRepository(session).search(workspace_id, term, limit=limit)),
    )


__all__ = ["SearchResults", "search_workspace"]
