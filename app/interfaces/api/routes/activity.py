"""Endpoints exposing task activity logs and comments."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.activities import (
    create_activity as create_activity_uc,
    create_comment as create_comment_uc,
    delete_comment as delete_comment_uc,
    list_activity_feed,
    list_task_activities,
    update_comment as update_comment_uc,
)
from app.domain.entities import ActivityFeedItem, User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.routes_helpers import http_error_from
from app.interfaces.api.schemas import (
    ActivityCreate,
    ActivityFeedRead,
    ActivityRead,
    CommentCreate,
    CommentDelete,
    CommentUpdate,
)

router = APIRouter(prefix="/activity", tags=["activity"])


def _feed_item_to_schema(item: ActivityFeedItem) -> ActivityFeedRead:
    activity = item.activity
    return ActivityFeedRead(
        id=activity.id,
        task_id=activity.task_id,
        type=activity.type,
        user_id=activity.user_id,
        content=activity.content,
        created_at=activity.created_at,
        task_title=item.task_title,
        task_number=item.task_number,
        project_id=item.project_id,
        project_name=item.project_name,
        project_slug=item.project_slug,
        workspace_id=item.workspace_id,
        workspace_name=item.workspace_name,
        user_name=item.user_name,
        user_email=item.user_email,
    )


@router.get("/", response_model=list[ActivityFeedRead])
def read_activity_feed(
    workspace_id: str = Query(..., description="Workspace whose activity is listed"),
    project_id: str | None = Query(None),
    user_id: str | None = Query(None),
    created_after: datetime | None = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[ActivityFeedRead]:
    """Return the workspace activity feed, newest first."""

    try:
        items = list_activity_feed(
            db,
            requesting_user_id=current_user.id,
            workspace_id=workspace_id,
            project_id=project_id,
            user_id=user_id,
            created_after=created_after,
        )
    except PermissionError as exc:
        raise http_error_from(exc) from exc
    return [_feed_item_to_schema(item) for item in items]


@router.post("/create", response_model=ActivityRead, status_code=status.HTTP_201_CREATED)
def create_activity(
    payload: ActivityCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ActivityRead:
    try:
        activity = create_activity_uc(
            db,
            task_id=payload.task_id,
            type=payload.type,
            user_id=current_user.id,
            content=payload.content,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ActivityRead.model_validate(activity)


@router.post("/comment", response_model=ActivityRead, status_code=status.HTTP_201_CREATED)
def create_comment(
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ActivityRead:
    try:
        comment = create_comment_uc(
            db, task_id=payload.task_id, user_id=current_user.id, content=payload.content
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ActivityRead.model_validate(comment)


@router.put("/comment", response_model=ActivityRead)
def update_comment(
    payload: CommentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ActivityRead:
    """Edit a comment; only its author may do so."""

    try:
        comment = update_comment_uc(
            db, activity_id=payload.id, user_id=current_user.id, content=payload.content
        )
    except (PermissionError, ValueError) as exc:
        raise http_error_from(exc) from exc
    return ActivityRead.model_validate(comment)


@router.delete("/comment", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    payload: CommentDelete,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    try:
        delete_comment_uc(db, activity_id=payload.id, user_id=current_user.id)
    except (PermissionError, ValueError) as exc:
        raise http_error_from(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{task_id}", response_model=list[ActivityRead])
def read_task_activities(
    task_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> list[ActivityRead]:
    """Return the activity log of a task, oldest first."""

    activities = list_task_activities(db, task_id)
    return [ActivityRead.model_validate(activity) for activity in activities]


__all__ = ["router"]
