"""SQLAlchemy models for tables owned by the auth service."""

from sqlalchemy import Column, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import generate_id, now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of an authenticated account."""

    __tablename__ = "user"

    id = Column(String(64), primary_key=True, default=generate_id)
    name = Column(String(120), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    image = Column(String(512), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


class WorkspaceModel(Base):
    """Database representation of a workspace (auth organisation)."""

    __tablename__ = "workspace"

    id = Column(String(64), primary_key=True, default=generate_id)
    name = Column(String(120), nullable=False)
    slug = Column(String(120), nullable=False, unique=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    members = relationship(
        "WorkspaceMemberModel",
        back_populates="workspace",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class WorkspaceMemberModel(Base):
    """Membership of a user in a workspace."""

    __tablename__ = "workspace_member"
    __table_args__ = (UniqueConstraint("workspace_id", "user_id"),)

    id = Column(String(64), primary_key=True, default=generate_id)
    workspace_id = Column(
        String(64), ForeignKey("workspace.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role = Column(String(32), nullable=False, default="member")
    joined_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    workspace = relationship("WorkspaceModel", back_populates="members")
    user = relationship("UserModel", lazy="joined")


__all__ = ["UserModel", "WorkspaceMemberModel", "WorkspaceModel"]
