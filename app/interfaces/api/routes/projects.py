"""Endpoints for managing projects and reading public boards."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.projects import (
    create_project as create_project_uc,
    delete_project as delete_project_uc,
    get_project as get_project_uc,
    get_public_project,
    list_projects as list_projects_uc,
    update_project as update_project_uc,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.repositories import MembershipRepository
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.routes_helpers import board_to_schema, http_error_from
from app.interfaces.api.schemas import (
    ProjectBoardRead,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
)

router = APIRouter(prefix="/project", tags=["projects"])
public_router = APIRouter(prefix="/public-project", tags=["projects"])


def _ensure_member(db: Session, workspace_id: str, user: User) -> None:
    if not MembershipRepository(db).is_member(workspace_id, user.id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have access to this workspace",
        )


@router.get("/", response_model=list[ProjectRead])
def list_projects(
    workspace_id: str = Query(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[ProjectRead]:
    _ensure_member(db, workspace_id, current_user)
    projects = list_projects_uc(db, workspace_id=workspace_id)
    return [ProjectRead.model_validate(project) for project in projects]


@router.post("/", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(
    payload: ProjectCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProjectRead:
    _ensure_member(db, payload.workspace_id, current_user)
    try:
        project = create_project_uc(
            db,
            workspace_id=payload.workspace_id,
            name=payload.name,
            icon=payload.icon,
            slug=payload.slug,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ProjectRead.model_validate(project)


@router.get("/{project_id}", response_model=ProjectRead)
def read_project(
    project_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> ProjectRead:
    try:
        project = get_project_uc(db, project_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ProjectRead.model_validate(project)


@router.put("/{project_id}", response_model=ProjectRead)
def update_project(
    project_id: str,
    payload: ProjectUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> ProjectRead:
    try:
        project = update_project_uc(
            db,
            project_id=project_id,
            name=payload.name,
            icon=payload.icon,
            slug=payload.slug,
            description=payload.description,
            is_public=payload.is_public,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ProjectRead.model_validate(project)


@router.delete("/{project_id}", response_model=ProjectRead)
def delete_project(
    project_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> ProjectRead:
    """Delete a project together with its tasks."""

    try:
        project = delete_project_uc(db, project_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ProjectRead.model_validate(project)


@public_router.get("/{project_id}", response_model=ProjectBoardRead)
def read_public_project(project_id: str, db: Session = Depends(get_db)) -> ProjectBoardRead:
    """Return the board of a public project without authentication."""

    try:
        board = get_public_project(db, project_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return board_to_schema(board)


__all__ = ["public_router", "router"]
