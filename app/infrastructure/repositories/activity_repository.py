"""Persistence layer for task activities and comments."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import Activity, ActivityFeedItem
from app.infrastructure.models import (
    ActivityModel,
    ProjectModel,
    TaskModel,
    UserModel,
    WorkspaceModel,
)
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class ActivityRepository:
    """Provide CRUD helpers for :class:`Activity` entries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, activity_id: str) -> Activity | None:
        model = self.session.get(ActivityModel, activity_id)
        return self._to_entity(model) if model else None

    def list_for_task(self, task_id: str) -> Sequence[Activity]:
        query = (
            self.session.query(ActivityModel)
            .filter(ActivityModel.task_id == task_id)
            .order_by(ActivityModel.created_at.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_feed(
        self,
        *,
        workspace_id: str | None = None,
        project_id: str | None = None,
        user_id: str | None = None,
        created_after: datetime | None = None,
    ) -> Sequence[ActivityFeedItem]:
        """Return activities joined with their task, project, workspace and author."""

        query = (
            self.session.query(
                ActivityModel,
                TaskModel.title,
                TaskModel.number,
                ProjectModel.id,
                ProjectModel.name,
                ProjectModel.slug,
                WorkspaceModel.id,
                WorkspaceModel.name,
                UserModel.name,
                UserModel.email,
            )
            .outerjoin(TaskModel, ActivityModel.task_id == TaskModel.id)
            .outerjoin(ProjectModel, TaskModel.project_id == ProjectModel.id)
            .outerjoin(WorkspaceModel, ProjectModel.workspace_id == WorkspaceModel.id)
            .outerjoin(UserModel, ActivityModel.user_id == UserModel.id)
        )
        if project_id:
            query = query.filter(TaskModel.project_id == project_id)
        if workspace_id:
            query = query.filter(ProjectModel.workspace_id == workspace_id)
        if user_id:
            query = query.filter(ActivityModel.user_id == user_id)
        if created_after is not None:
            query = query.filter(
                ActivityModel.created_at >= ensure_app_naive_datetime(created_after)
            )
        query = query.order_by(ActivityModel.created_at.desc())

        return [
            ActivityFeedItem(
                activity=self._to_entity(model),
                task_title=task_title,
                task_number=task_number,
                project_id=project_id_value,
                project_name=project_name,
                project_slug=project_slug,
                workspace_id=workspace_id_value,
                workspace_name=workspace_name,
                user_name=user_name,
                user_email=user_email,
            )
            for (
                model,
                task_title,
                task_number,
                project_id_value,
                project_name,
                project_slug,
                workspace_id_value,
                workspace_name,
                user_name,
                user_email,
            ) in query.all()
        ]

    def create(self, activity: Activity) -> Activity:
        model = ActivityModel()
        model.task_id = activity.task_id
        model.type = activity.type
        model.user_id = activity.user_id
        model.content = activity.content
        if activity.created_at is not None:
            model.created_at = ensure_app_naive_datetime(activity.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_content(self, activity_id: str, content: str) -> Activity:
        model = self.session.get(ActivityModel, activity_id)
        if model is None:
            raise ValueError("Activity not found")
        model.content = content
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, activity_id: str) -> bool:
        model = self.session.get(ActivityModel, activity_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _to_entity(model: ActivityModel) -> Activity:
        return Activity(
            id=model.id,
            task_id=model.task_id,
            type=model.type,
            user_id=model.user_id,
            content=model.content,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ActivityRepository"]
