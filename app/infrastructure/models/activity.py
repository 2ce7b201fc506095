"""SQLAlchemy model for task activities and comments."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from app.infrastructure.database import Base
from app.utils import generate_id, now_in_app_naive_datetime


class ActivityModel(Base):
    """Database representation of an activity log entry."""

    __tablename__ = "activity"

    id = Column(String(64), primary_key=True, default=generate_id)
    task_id = Column(
        String(64), ForeignKey("task.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(String(50), nullable=False)
    user_id = Column(
        String(64), ForeignKey("user.id", ondelete="SET NULL"), nullable=True, index=True
    )
    content = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ActivityModel"]
