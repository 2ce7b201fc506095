"""Field level diff between two versions of a task.

``diff_task`` compares an old and a new :class:`Task` and returns one tagged
change per field whose value actually differs. ``build_task_events`` maps the
changes onto the :class:`DomainEvent` published for each of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from app.domain.entities import Task
from app.domain.events import (
    TASK_ASSIGNEE_CHANGED,
    TASK_DESCRIPTION_CHANGED,
    TASK_DUE_DATE_CHANGED,
    TASK_PRIORITY_CHANGED,
    TASK_STATUS_CHANGED,
    TASK_TITLE_CHANGED,
    TASK_UNASSIGNED,
    DomainEvent,
)
from app.utils import to_utc_isoformat


@dataclass(frozen=True)
class StatusChanged:
    old: str
    new: str


@dataclass(frozen=True)
class PriorityChanged:
    old: str
    new: str


@dataclass(frozen=True)
class AssigneeChanged:
    old: str | None
    new: str


@dataclass(frozen=True)
class Unassigned:
    old: str


@dataclass(frozen=True)
class DueDateChanged:
    old: str | None
    new: str | None


@dataclass(frozen=True)
class TitleChanged:
    old: str
    new: str


@dataclass(frozen=True)
class DescriptionChanged:
    old: str
    new: str


TaskChange = Union[
    StatusChanged,
    PriorityChanged,
    AssigneeChanged,
    Unassigned,
    DueDateChanged,
    TitleChanged,
    DescriptionChanged,
]


def _due_date_key(value: datetime | None) -> str | None:
    return to_utc_isoformat(value)


def diff_task(old: Task, new: Task) -> list[TaskChange]:
    """Return the changes between ``old`` and ``new`` in a fixed field order."""

    changes: list[TaskChange] = []

    if old.status != new.status:
        changes.append(StatusChanged(old=old.status, new=new.status))

    if old.priority != new.priority:
        changes.append(PriorityChanged(old=old.priority, new=new.priority))

    old_assignee = old.assignee_id
    new_assignee = new.assignee_id
    if old_assignee != new_assignee:
        if new_assignee is None:
            changes.append(Unassigned(old=old_assignee))
        else:
            changes.append(AssigneeChanged(old=old_assignee, new=new_assignee))

    old_due = _due_date_key(old.due_date)
    new_due = _due_date_key(new.due_date)
    if old_due != new_due:
        changes.append(DueDateChanged(old=old_due, new=new_due))

    if old.title != new.title:
        changes.append(TitleChanged(old=old.title, new=new.title))

    if (old.description or "") != (new.description or ""):
        changes.append(
            DescriptionChanged(old=old.description or "", new=new.description or "")
        )

    return changes


def requires_assignee_name(changes: list[TaskChange]) -> bool:
    """Return ``True`` when a change needs the new assignee's display name."""

    return any(isinstance(change, AssigneeChanged) for change in changes)


def build_task_events(
    task: Task,
    changes: list[TaskChange],
    *,
    actor_id: str | None,
    assignee_name: str | None = None,
) -> list[DomainEvent]:
    """Map each change to the event published for it."""

    if task.id is None:
        raise ValueError("Task must be persisted before publishing events")

    events: list[DomainEvent] = []
    for change in changes:
        common = {"task_id": task.id, "user_id": actor_id, "title": task.title}
        if isinstance(change, StatusChanged):
            event = DomainEvent.for_task(
                TASK_STATUS_CHANGED,
                **common,
                old_status=change.old,
                new_status=change.new,
            )
        elif isinstance(change, PriorityChanged):
            event = DomainEvent.for_task(
                TASK_PRIORITY_CHANGED,
                **common,
                old_priority=change.old,
                new_priority=change.new,
            )
        elif isinstance(change, AssigneeChanged):
            event = DomainEvent.for_task(
                TASK_ASSIGNEE_CHANGED,
                **common,
                old_assignee=change.old,
                new_assignee=change.new,
                new_assignee_name=assignee_name,
            )
        elif isinstance(change, Unassigned):
            event = DomainEvent.for_task(
                TASK_UNASSIGNED, **common, old_assignee=change.old
            )
        elif isinstance(change, DueDateChanged):
            event = DomainEvent.for_task(
                TASK_DUE_DATE_CHANGED,
                **common,
                old_due_date=change.old,
                new_due_date=change.new,
            )
        elif isinstance(change, TitleChanged):
            event = DomainEvent.for_task(
                TASK_TITLE_CHANGED,
                **common,
                old_title=change.old,
                new_title=change.new,
            )
        elif isinstance(change, DescriptionChanged):
            event = DomainEvent.for_task(TASK_DESCRIPTION_CHANGED, **common)
        else:  # pragma: no cover - exhaustive over TaskChange
            raise TypeError(f"Unsupported task change: {change!r}")
        events.append(event)
    return events


__all__ = [
    "AssigneeChanged",
    "DescriptionChanged",
    "DueDateChanged",
    "PriorityChanged",
    "StatusChanged",
    "TaskChange",
    "TitleChanged",
    "Unassigned",
    "build_task_events",
    "diff_task",
    "requires_assignee_name",
]
