"""Use cases for managing labels."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Label
from app.infrastructure.repositories import LabelRepository, TaskRepository


def list_task_labels(session: Session, task_id: str) -> Sequence[Label]:
    return LabelRepository(session).list_by_task(task_id)


def list_workspace_labels(session: Session, workspace_id: str) -> Sequence[Label]:
    return LabelRepository(session).list_by_workspace(workspace_id)


def get_label(session: Session, label_id: str) -> Label:
    label = LabelRepository(session).get(label_id)
    if label is None:
        raise ValueError("Label not found")
    return label


def create_label(
    session: Session,
    *,
    name: str,
    color: str,
    workspace_id: str,
    task_id: str | None = None,
) -> Label:
    if task_id and TaskRepository(session).get(task_id) is None:
        raise ValueError("Task not found")
    return LabelRepository(session).create(
        Label(id=None, name=name, color=color, workspace_id=workspace_id, task_id=task_id)
    )


def update_label(session: Session, label_id: str, *, name: str, color: str) -> Label:
    label = LabelRepository(session).update(label_id, name=name, color=color)
    if label is None:
        raise ValueError("Label not found")
    return label


def delete_label(session: Session, label_id: str) -> Label:
    label = LabelRepository(session).delete(label_id)
    if label is None:
        raise ValueError("Label not found")
    return label


__all__ = [
    "create_label",
    "delete_label",
    "get_label",
    "list_task_labels",
    "list_workspace_labels",
    "update_label",
]
