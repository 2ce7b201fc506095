"""Endpoints for managing task labels."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.labels import (
    create_label as create_label_uc,
    delete_label as delete_label_uc,
    get_label as get_label_uc,
    list_task_labels,
    list_workspace_labels,
    update_label as update_label_uc,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.routes_helpers import http_error_from
from app.interfaces.api.schemas import LabelCreate, LabelRead, LabelUpdate

router = APIRouter(prefix="/label", tags=["labels"])


@router.get("/task/{task_id}", response_model=list[LabelRead])
def read_task_labels(
    task_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> list[LabelRead]:
    return [LabelRead.model_validate(label) for label in list_task_labels(db, task_id)]


@router.get("/workspace/{workspace_id}", response_model=list[LabelRead])
def read_workspace_labels(
    workspace_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> list[LabelRead]:
    labels = list_workspace_labels(db, workspace_id)
    return [LabelRead.model_validate(label) for label in labels]


@router.post("/", response_model=LabelRead, status_code=status.HTTP_201_CREATED)
def create_label(
    payload: LabelCreate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> LabelRead:
    try:
        label = create_label_uc(
            db,
            name=payload.name,
            color=payload.color,
            workspace_id=payload.workspace_id,
            task_id=payload.task_id,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return LabelRead.model_validate(label)


@router.get("/{label_id}", response_model=LabelRead)
def read_label(
    label_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> LabelRead:
    try:
        label = get_label_uc(db, label_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return LabelRead.model_validate(label)


@router.put("/{label_id}", response_model=LabelRead)
def update_label(
    label_id: str,
    payload: LabelUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> LabelRead:
    try:
        label = update_label_uc(db, label_id, name=payload.name, color=payload.color)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return LabelRead.model_validate(label)


@router.delete("/{label_id}", response_model=LabelRead)
def delete_label(
    label_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> LabelRead:
    try:
        label = delete_label_uc(db, label_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return LabelRead.model_validate(label)


__all__ = ["router"]
