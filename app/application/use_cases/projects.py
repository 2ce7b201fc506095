"""Use cases for managing projects."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from app.application.use_cases.tasks import ProjectBoard, get_project_board
from app.domain.entities import Project
from app.infrastructure.repositories import ProjectRepository
from app.utils import slugify


def list_projects(session: Session, *, workspace_id: str) -> Sequence[Project]:
    return ProjectRepository(session).list_by_workspace(workspace_id)


def get_project(session: Session, project_id: str) -> Project:
    project = ProjectRepository(session).get(project_id)
    if project is None:
        raise ValueError("Project not found")
    return project


def create_project(
    session: Session,
    *,
    workspace_id: str,
    name: str,
    icon: str,
    slug: str | None = None,
) -> Project:
    """Create a project; the slug is derived from ``name`` when omitted."""

    slug = slugify(slug or name)
    if not slug:
        raise ValueError("Project slug cannot be empty")
    return ProjectRepository(session).create(
        Project(id=None, workspace_id=workspace_id, name=name, slug=slug, icon=icon)
    )


def update_project(
    session: Session,
    *,
    project_id: str,
    name: str,
    icon: str,
    slug: str,
    description: str | None,
    is_public: bool,
) -> Project:
    current = get_project(session, project_id)
    return ProjectRepository(session).update(
        replace(
            current,
            name=name,
            icon=icon,
            slug=slugify(slug) or current.slug,
            description=description,
            is_public=is_public,
        )
    )


def delete_project(session: Session, project_id: str) -> Project:
    project = get_project(session, project_id)
    ProjectRepository(session).delete(project_id)
    return project


def get_public_project(session: Session, project_id: str) -> ProjectBoard:
    """Return the board of a project shared publicly, or raise an error."""

    board = get_project_board(session, project_id)
    if not board.project.is_public:
        raise ValueError("Project not found")
    return board


__all__ = [
    "create_project",
    "delete_project",
    "get_project",
    "get_public_project",
    "list_projects",
    "update_project",
]
