"""Persistence layer for task entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Task
from app.infrastructure.models import LabelModel, ProjectModel, TaskModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class TaskRepository:
    """Provide CRUD operations for :class:`Task` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, task_id: str) -> Task | None:
        model = self.session.get(TaskModel, task_id)
        return self._to_entity(model) if model else None

    def list_by_project(self, project_id: str) -> Sequence[Task]:
        query = (
            self.session.query(TaskModel)
            .filter(TaskModel.project_id == project_id)
            .order_by(TaskModel.position, TaskModel.created_at)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_by_workspace(
        self,
        workspace_id: str,
        *,
        project_id: str | None = None,
        user_id: str | None = None,
        status: str | None = None,
        labels: Sequence[str] | None = None,
        minimum_due_date: datetime | None = None,
        maximum_due_date: datetime | None = None,
    ) -> Sequence[Task]:
        query = (
            self.session.query(TaskModel)
            .join(ProjectModel, TaskModel.project_id == ProjectModel.id)
            .filter(ProjectModel.workspace_id == workspace_id)
        )
        if project_id:
            query = query.filter(TaskModel.project_id == project_id)
        if user_id:
            query = query.filter(TaskModel.user_id == user_id)
        if status:
            query = query.filter(TaskModel.status == status)
        if minimum_due_date is not None:
            query = query.filter(
                TaskModel.due_date >= ensure_app_naive_datetime(minimum_due_date)
            )
        if maximum_due_date is not None:
            query = query.filter(
                TaskModel.due_date <= ensure_app_naive_datetime(maximum_due_date)
            )
        if labels:
            labelled = (
                self.session.query(LabelModel.task_id)
                .filter(LabelModel.name.in_(list(labels)))
                .filter(LabelModel.task_id.is_not(None))
                .distinct()
            )
            query = query.filter(TaskModel.id.in_(labelled))
        query = query.order_by(TaskModel.position, TaskModel.created_at)
        return [self._to_entity(model) for model in query.all()]

    def search(self, workspace_id: str, term: str, *, limit: int = 20) -> Sequence[Task]:
        pattern = f"%{term.lower()}%"
        query = (
            self.session.query(TaskModel)
            .join(ProjectModel, TaskModel.project_id == ProjectModel.id)
            .filter(ProjectModel.workspace_id == workspace_id)
            .filter(func.lower(TaskModel.title).like(pattern))
            .order_by(TaskModel.created_at.desc())
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def next_number(self, project_id: str) -> int:
        current = (
            self.session.query(func.max(TaskModel.number))
            .filter(TaskModel.project_id == project_id)
            .scalar()
        )
        return (current or 0) + 1

    def next_position(self, project_id: str, status: str) -> int:
        current = (
            self.session.query(func.max(TaskModel.position))
            .filter(TaskModel.project_id == project_id)
            .filter(TaskModel.status == status)
            .scalar()
        )
        return 0 if current is None else current + 1

    def create(self, task: Task) -> Task:
        model = TaskModel()
        self._apply_entity_to_model(model, task)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, task: Task) -> Task:
        if task.id is None:
            raise ValueError("Task id is required for updates")
        model = self.session.get(TaskModel, task.id)
        if model is None:
            raise ValueError("Task not found")
        self._apply_entity_to_model(model, task)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, task_id: str) -> bool:
        model = self.session.get(TaskModel, task_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: TaskModel, task: Task) -> None:
        model.project_id = task.project_id
        model.number = task.number
        model.title = task.title
        model.description = task.description or ""
        model.status = task.status
        model.priority = task.priority
        model.due_date = ensure_app_naive_datetime(task.due_date)
        model.user_id = task.user_id or None
        model.position = task.position
        if task.created_at is not None:
            model.created_at = ensure_app_naive_datetime(task.created_at)

    @staticmethod
    def _to_entity(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            project_id=model.project_id,
            number=model.number,
            title=model.title,
            description=model.description or "",
            status=model.status,
            priority=model.priority,
            due_date=ensure_app_timezone(model.due_date),
            user_id=model.user_id,
            position=model.position or 0,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["TaskRepository"]
