"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import generate_id, now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(String(64), primary_key=True, default=generate_id)
    user_id = Column(
        String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=True)
    type = Column(String(50), nullable=False, default="info")
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    resource_id = Column(String(64), nullable=True)
    resource_type = Column(String(50), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["NotificationModel"]
