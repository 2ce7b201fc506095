"""Read access to users and workspace membership.

The rows are written by the auth service; the API only needs to resolve
bearer tokens to users and workspace members to display names.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Member, User, Workspace
from app.infrastructure.models import (
    ProjectModel,
    TaskModel,
    UserModel,
    WorkspaceMemberModel,
    WorkspaceModel,
)
from app.utils import ensure_app_timezone


class UserRepository:
    """Look up :class:`User` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        if model is None:
            return None
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            image=model.image,
            created_at=ensure_app_timezone(model.created_at),
        )


class MembershipRepository:
    """Resolve workspace membership for users, projects and tasks."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_workspace(self, workspace_id: str) -> Workspace | None:
        model = self.session.get(WorkspaceModel, workspace_id)
        if model is None:
            return None
        return Workspace(
            id=model.id,
            name=model.name,
            slug=model.slug,
            created_at=ensure_app_timezone(model.created_at),
        )

    def list_members(self, workspace_id: str) -> Sequence[Member]:
        query = (
            self.session.query(WorkspaceMemberModel)
            .filter(WorkspaceMemberModel.workspace_id == workspace_id)
            .order_by(WorkspaceMemberModel.joined_at)
        )
        return [
            Member(
                user_id=model.user_id,
                workspace_id=model.workspace_id,
                name=model.user.name,
                email=model.user.email,
                role=model.role,
            )
            for model in query.all()
        ]

    def is_member(self, workspace_id: str, user_id: str) -> bool:
        return (
            self.session.query(WorkspaceMemberModel.id)
            .filter(WorkspaceMemberModel.workspace_id == workspace_id)
            .filter(WorkspaceMemberModel.user_id == user_id)
            .first()
            is not None
        )

    def workspace_id_for_task(self, task_id: str) -> str | None:
        return (
            self.session.query(ProjectModel.workspace_id)
            .join(TaskModel, TaskModel.project_id == ProjectModel.id)
            .filter(TaskModel.id == task_id)
            .scalar()
        )


__all__ = ["MembershipRepository", "UserRepository"]
