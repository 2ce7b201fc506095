"""Persistence layer for projects."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Project
from app.infrastructure.models import ProjectModel
from app.utils import ensure_app_timezone


class ProjectRepository:
    """Provide CRUD operations for :class:`Project` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, project_id: str) -> Project | None:
        model = self.session.get(ProjectModel, project_id)
        return self._to_entity(model) if model else None

    def list_by_workspace(self, workspace_id: str) -> Sequence[Project]:
        query = (
            self.session.query(ProjectModel)
            .filter(ProjectModel.workspace_id == workspace_id)
            .order_by(ProjectModel.created_at)
        )
        return [self._to_entity(model) for model in query.all()]

    def search(self, workspace_id: str, term: str, *, limit: int = 20) -> Sequence[Project]:
        query = (
            self.session.query(ProjectModel)
            .filter(ProjectModel.workspace_id == workspace_id)
            .filter(func.lower(ProjectModel.name).like(f"%{term.lower()}%"))
            .order_by(ProjectModel.name)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, project: Project) -> Project:
        model = ProjectModel()
        self._apply_entity_to_model(model, project)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, project: Project) -> Project:
        model = self.session.get(ProjectModel, project.id)
        if model is None:
            raise ValueError("Project not found")
        self._apply_entity_to_model(model, project)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, project_id: str) -> bool:
        model = self.session.get(ProjectModel, project_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: ProjectModel, project: Project) -> None:
        model.workspace_id = project.workspace_id
        model.name = project.name
        model.slug = project.slug
        model.icon = project.icon
        model.description = project.description
        model.is_public = project.is_public

    @staticmethod
    def _to_entity(model: ProjectModel) -> Project:
        return Project(
            id=model.id,
            workspace_id=model.workspace_id,
            name=model.name,
            slug=model.slug,
            icon=model.icon,
            description=model.description,
            is_public=bool(model.is_public),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ProjectRepository"]
