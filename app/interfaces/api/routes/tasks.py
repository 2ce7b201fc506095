"""Endpoints for reading and mutating tasks.

Every mutation goes through a use case that publishes the resulting domain
events on the application's event bus.
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.event_bus import EventBus
from app.application.use_cases.tasks import (
    create_task as create_task_uc,
    delete_task as delete_task_uc,
    export_tasks as export_tasks_uc,
    get_project_board,
    get_task as get_task_uc,
    import_tasks as import_tasks_uc,
    list_workspace_tasks,
    update_task as update_task_uc,
    update_task_assignee,
    update_task_description,
    update_task_due_date,
    update_task_priority,
    update_task_status,
    update_task_title,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user, get_event_bus
from app.interfaces.api.routes_helpers import board_to_schema, http_error_from
from app.interfaces.api.schemas import (
    ProjectBoardRead,
    TaskAssigneeUpdate,
    TaskCreate,
    TaskDescriptionUpdate,
    TaskDueDateUpdate,
    TaskExportRead,
    TaskImportRequest,
    TaskImportResponse,
    TaskPriorityUpdate,
    TaskRead,
    TaskStatusUpdate,
    TaskTitleUpdate,
    TaskUpdate,
)

router = APIRouter(prefix="/task", tags=["tasks"])


def _split_labels(raw: str | None) -> list[str] | None:
    if not raw:
        return None
    labels = [label.strip() for label in raw.split(",") if label.strip()]
    return labels or None


@router.get("/tasks/{project_id}", response_model=ProjectBoardRead)
def read_project_board(
    project_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> ProjectBoardRead:
    """Return the project's tasks grouped by board column."""

    try:
        board = get_project_board(db, project_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return board_to_schema(board)


@router.get("/workspace/{workspace_id}", response_model=list[TaskRead])
def read_workspace_tasks(
    workspace_id: str,
    project_id: str | None = Query(None),
    user_id: str | None = Query(None),
    task_status: str | None = Query(None, alias="status"),
    labels: str | None = Query(None, description="Comma separated label names"),
    minimum_due_date: datetime | None = Query(None),
    maximum_due_date: datetime | None = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[TaskRead]:
    try:
        tasks = list_workspace_tasks(
            db,
            workspace_id=workspace_id,
            requesting_user_id=current_user.id,
            project_id=project_id,
            user_id=user_id,
            status=task_status,
            labels=_split_labels(labels),
            minimum_due_date=minimum_due_date,
            maximum_due_date=maximum_due_date,
        )
    except (PermissionError, ValueError) as exc:
        raise http_error_from(exc) from exc
    return [TaskRead.model_validate(task) for task in tasks]


@router.get("/export/{project_id}", response_model=TaskExportRead)
def export_tasks(
    project_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> TaskExportRead:
    try:
        project_name, tasks, exported_at = export_tasks_uc(db, project_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return TaskExportRead(
        project=project_name,
        exported_at=exported_at,
        tasks=[TaskRead.model_validate(task) for task in tasks],
    )


@router.post("/import/{project_id}", response_model=TaskImportResponse)
def import_tasks(
    project_id: str,
    payload: TaskImportRequest,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_user: User = Depends(get_current_user),
) -> TaskImportResponse:
    """Create the provided tasks, publishing ``task.created`` for each one."""

    try:
        created = import_tasks_uc(
            db,
            bus,
            project_id=project_id,
            actor_id=current_user.id,
            tasks=[item.model_dump() for item in payload.tasks],
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return TaskImportResponse(
        imported=len(created),
        tasks=[TaskRead.model_validate(task) for task in created],
    )


@router.put("/status/{task_id}", response_model=TaskRead)
def change_task_status(
    task_id: str,
    payload: TaskStatusUpdate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    try:
        task = update_task_status(
            db, bus, task_id=task_id, actor_id=current_user.id, status=payload.status
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return TaskRead.model_validate(task)


@router.put("/priority/{task_id}", response_model=TaskRead)
def change_task_priority(
    task_id: str,
    payload: TaskPriorityUpdate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    try:
        task = update_task_priority(
            db, bus, task_id=task_id, actor_id=current_user.id, priority=payload.priority
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return TaskRead.model_validate(task)


@router.put("/assignee/{task_id}", response_model=TaskRead)
def change_task_assignee(
    task_id: str,
    payload: TaskAssigneeUpdate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    """Assign the task; an empty ``user_id`` unassigns it."""

    try:
        task = update_task_assignee(
            db, bus, task_id=task_id, actor_id=current_user.id, user_id=payload.user_id
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return TaskRead.model_validate(task)


@router.put("/due-date/{task_id}", response_model=TaskRead)
def change_task_due_date(
    task_id: str,
    payload: TaskDueDateUpdate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    try:
        task = update_task_due_date(
            db, bus, task_id=task_id, actor_id=current_user.id, due_date=payload.due_date
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return TaskRead.model_validate(task)


@router.put("/title/{task_id}", response_model=TaskRead)
def change_task_title(
    task_id: str,
    payload: TaskTitleUpdate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    try:
        task = update_task_title(
            db, bus, task_id=task_id, actor_id=current_user.id, title=payload.title
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return TaskRead.model_validate(task)


@router.put("/description/{task_id}", response_model=TaskRead)
def change_task_description(
    task_id: str,
    payload: TaskDescriptionUpdate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    try:
        task = update_task_description(
            db,
            bus,
            task_id=task_id,
            actor_id=current_user.id,
            description=payload.description,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return TaskRead.model_validate(task)


@router.post("/{project_id}", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(
    project_id: str,
    payload: TaskCreate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    try:
        task = create_task_uc(
            db,
            bus,
            project_id=project_id,
            actor_id=current_user.id,
            title=payload.title,
            description=payload.description,
            status=payload.status,
            priority=payload.priority,
            due_date=payload.due_date,
            user_id=payload.user_id,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return TaskRead.model_validate(task)


@router.get("/{task_id}", response_model=TaskRead)
def read_task(
    task_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> TaskRead:
    try:
        task = get_task_uc(db, task_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return TaskRead.model_validate(task)


@router.put("/{task_id}", response_model=TaskRead)
def update_task(
    task_id: str,
    payload: TaskUpdate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    """Replace the task and publish one event per field that changed."""

    try:
        task = update_task_uc(
            db,
            bus,
            task_id=task_id,
            actor_id=current_user.id,
            title=payload.title,
            description=payload.description,
            status=payload.status,
            priority=payload.priority,
            project_id=payload.project_id,
            position=payload.position,
            due_date=payload.due_date,
            user_id=payload.user_id,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return TaskRead.model_validate(task)


@router.delete("/{task_id}", response_model=TaskRead)
def delete_task(
    task_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> TaskRead:
    try:
        task = delete_task_uc(db, task_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return TaskRead.model_validate(task)


__all__ = ["router"]
