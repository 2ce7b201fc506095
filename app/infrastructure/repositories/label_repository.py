"""Persistence layer for labels."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Label
from app.infrastructure.models import LabelModel
from app.utils import ensure_app_timezone


class LabelRepository:
    """Provide CRUD operations for :class:`Label` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, label_id: str) -> Label | None:
        model = self.session.get(LabelModel, label_id)
        return self._to_entity(model) if model else None

    def list_by_task(self, task_id: str) -> Sequence[Label]:
        query = self.session.query(LabelModel).filter(LabelModel.task_id == task_id)
        return [self._to_entity(model) for model in query.order_by(LabelModel.name).all()]

    def list_by_workspace(self, workspace_id: str) -> Sequence[Label]:
        query = self.session.query(LabelModel).filter(
            LabelModel.workspace_id == workspace_id
        )
        return [self._to_entity(model) for model in query.order_by(LabelModel.name).all()]

    def create(self, label: Label) -> Label:
        model = LabelModel(
            name=label.name,
            color=label.color,
            task_id=label.task_id,
            workspace_id=label.workspace_id,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, label_id: str, *, name: str, color: str) -> Label | None:
        model = self.session.get(LabelModel, label_id)
        if model is None:
            return None
        model.name = name
        model.color = color
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, label_id: str) -> Label | None:
        model = self.session.get(LabelModel, label_id)
        if model is None:
            return None
        entity = self._to_entity(model)
        self.session.delete(model)
        self.session.commit()
        return entity

    @staticmethod
    def _to_entity(model: LabelModel) -> Label:
        return Label(
            id=model.id,
            name=model.name,
            color=model.color,
            workspace_id=model.workspace_id,
            task_id=model.task_id,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["LabelRepository"]
