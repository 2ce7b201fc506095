"""Event bus subscribers deriving records from task events."""

from typing import Callable

from sqlalchemy.orm import Session

from app.application.event_bus import EventBus

from .activity import register_activity_subscribers, render_activity_content
from .notifications import draft_notification, register_notification_subscribers


def register_subscribers(bus: EventBus, session_factory: Callable[[], Session]) -> None:
    """Attach the activity writer, then the notification dispatcher, to ``bus``."""

    register_activity_subscribers(bus, session_factory)
    register_notification_subscribers(bus, session_factory)


__all__ = [
    "draft_notification",
    "register_activity_subscribers",
    "register_notification_subscribers",
    "register_subscribers",
    "render_activity_content",
]
