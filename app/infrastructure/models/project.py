"""SQLAlchemy model for projects."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import generate_id, now_in_app_naive_datetime


class ProjectModel(Base):
    """Database representation of a project."""

    __tablename__ = "project"

    id = Column(String(64), primary_key=True, default=generate_id)
    workspace_id = Column(
        String(64), ForeignKey("workspace.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(120), nullable=False)
    slug = Column(String(120), nullable=False)
    icon = Column(String(64), nullable=False, default="Layout")
    description = Column(Text, nullable=True)
    is_public = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ProjectModel"]
