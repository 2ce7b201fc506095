"""SQLAlchemy model for tasks."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import generate_id, now_in_app_naive_datetime


class TaskModel(Base):
    """Database representation of a task."""

    __tablename__ = "task"

    id = Column(String(64), primary_key=True, default=generate_id)
    project_id = Column(
        String(64), ForeignKey("project.id", ondelete="CASCADE"), nullable=False, index=True
    )
    number = Column(Integer, nullable=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    status = Column(String(32), nullable=False)
    priority = Column(String(32), nullable=False, default="low")
    due_date = Column(DateTime, nullable=True)
    user_id = Column(
        String(64), ForeignKey("user.id", ondelete="SET NULL"), nullable=True, index=True
    )
    position = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["TaskModel"]
