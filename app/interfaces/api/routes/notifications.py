"""Endpoints and websocket handler for user notifications."""

from __future__ import annotations

import logging

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    clear_notifications,
    create_notification as create_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_as_read,
    mark_notification_as_read,
)
from app.domain.entities import User
from app.infrastructure.database import SessionLocal, get_db
from app.infrastructure.notifications import notification_manager, serialize_notification
from app.infrastructure.repositories import NotificationRepository
from app.interfaces.api.dependencies import get_current_user, resolve_current_user
from app.interfaces.api.routes_helpers import http_error_from
from app.interfaces.api.schemas import (
    NotificationCountResponse,
    NotificationCreate,
    NotificationRead,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notification", tags=["notifications"])


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[NotificationRead]:
    """Return the authenticated user's notifications, newest first."""

    notifications = list_notifications_uc(db, user_id=current_user.id)
    return [NotificationRead.model_validate(notification) for notification in notifications]


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> NotificationRead:
    notification = create_notification_uc(
        db,
        user_id=payload.user_id,
        title=payload.title,
        content=payload.content,
        type=payload.type,
        resource_id=payload.resource_id,
        resource_type=payload.resource_type,
    )
    return NotificationRead.model_validate(notification)


@router.patch("/read-all", response_model=NotificationCountResponse)
def mark_all_as_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationCountResponse:
    count = mark_all_notifications_as_read(db, user_id=current_user.id)
    return NotificationCountResponse(count=count)


@router.delete("/clear-all", response_model=NotificationCountResponse)
def clear_all(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationCountResponse:
    count = clear_notifications(db, user_id=current_user.id)
    return NotificationCountResponse(count=count)


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_as_read(
    notification_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationRead:
    try:
        notification = mark_notification_as_read(
            db, notification_id=notification_id, user_id=current_user.id
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return NotificationRead.model_validate(notification)


def _acknowledge(user_id: str, ids: list[object]) -> None:
    session = SessionLocal()
    try:
        repository = NotificationRepository(session)
        for notification_id in ids:
            if isinstance(notification_id, str):
                repository.mark_as_read(notification_id, user_id=user_id)
    finally:
        session.close()


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint that streams notifications to the authenticated user."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=1008)
        return

    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
        pending_notifications = NotificationRepository(session).list_unread_for_user(
            user.id
        )
    except HTTPException:
        await websocket.close(code=1008)
        return
    finally:
        session.close()

    await notification_manager.connect(user.id, websocket)
    try:
        if pending_notifications:
            await websocket.send_json(
                {
                    "type": "init",
                    "data": [serialize_notification(n) for n in pending_notifications],
                }
            )
        while True:
            try:
                message = await websocket.receive_json()
            except (TypeError, ValueError):
                logger.debug("Ignoring malformed frame from user %s", user.id)
                continue
            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list) and ids:
                    _acknowledge(user.id, ids)
    except WebSocketDisconnect:
        logger.debug("Notification websocket closed for user %s", user.id)
    finally:
        notification_manager.disconnect(user.id, websocket)


__all__ = ["router"]
