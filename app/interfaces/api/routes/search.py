"""Workspace search endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.search import search_workspace
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.routes_helpers import http_error_from
from app.interfaces.api.schemas import ProjectRead, SearchResultsRead, TaskRead

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/", response_model=SearchResultsRead)
def search(
    q: str = Query(..., description="Text matched against task titles and project names"),
    workspace_id: str = Query(...),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SearchResultsRead:
    try:
        results = search_workspace(
            db,
            workspace_id=workspace_id,
            requesting_user_id=current_user.id,
            query=q,
            limit=limit,
        )
    except PermissionError as exc:
        raise http_error_from(exc) from exc
    return SearchResultsRead(
        tasks=[TaskRead.model_validate(task) for task in results.tasks],
        projects=[ProjectRead.model_validate(project) for project in results.projects],
    )


__all__ = ["router"]
