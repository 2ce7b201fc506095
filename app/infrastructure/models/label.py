"""SQLAlchemy model for labels."""

from sqlalchemy import Column, DateTime, ForeignKey, String

from app.infrastructure.database import Base
from app.utils import generate_id, now_in_app_naive_datetime


class LabelModel(Base):
    """Database representation of a label."""

    __tablename__ = "label"

    id = Column(String(64), primary_key=True, default=generate_id)
    name = Column(String(120), nullable=False)
    color = Column(String(32), nullable=False)
    task_id = Column(
        String(64), ForeignKey("task.id", ondelete="CASCADE"), nullable=True, index=True
    )
    workspace_id = Column(
        String(64), ForeignKey("workspace.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["LabelModel"]
