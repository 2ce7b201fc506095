"""Domain events published after a task changes state."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

TASK_CREATED = "task.created"
TASK_STATUS_CHANGED = "task.status_changed"
TASK_PRIORITY_CHANGED = "task.priority_changed"
TASK_ASSIGNEE_CHANGED = "task.assignee_changed"
TASK_UNASSIGNED = "task.unassigned"
TASK_DUE_DATE_CHANGED = "task.due_date_changed"
TASK_TITLE_CHANGED = "task.title_changed"
TASK_DESCRIPTION_CHANGED = "task.description_changed"

TASK_EVENTS = (
    TASK_CREATED,
    TASK_STATUS_CHANGED,
    TASK_PRIORITY_CHANGED,
    TASK_ASSIGNEE_CHANGED,
    TASK_UNASSIGNED,
    TASK_DUE_DATE_CHANGED,
    TASK_TITLE_CHANGED,
    TASK_DESCRIPTION_CHANGED,
)

_EVENT_PREFIX = "task."
_CREATED_TYPE = "create"


def activity_type_for(event_name: str) -> str:
    """Return the activity ``type`` recorded for ``event_name``.

    ``task.status_changed`` becomes ``status_changed``; task creation is
    recorded as ``create``.
    """

    if event_name == TASK_CREATED:
        return _CREATED_TYPE
    if event_name.startswith(_EVENT_PREFIX):
        return event_name[len(_EVENT_PREFIX) :]
    return event_name


@dataclass(frozen=True)
class DomainEvent:
    """Named, immutable notification of a completed state change.

    Every task event payload carries ``task_id``, ``user_id`` (the actor, or
    ``None`` for system actions), ``title`` and ``type`` in addition to its
    event specific fields.
    """

    name: str
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    @classmethod
    def for_task(
        cls,
        name: str,
        *,
        task_id: str,
        user_id: str | None,
        title: str,
        **fields: Any,
    ) -> "DomainEvent":
        payload = {
            "task_id": task_id,
            "user_id": user_id,
            "title": title,
            "type": activity_type_for(name),
            **fields,
        }
        return cls(name=name, payload=payload)

    @property
    def task_id(self) -> str | None:
        return self.payload.get("task_id")

    @property
    def actor_id(self) -> str | None:
        return self.payload.get("user_id")


__all__ = [
    "DomainEvent",
    "TASK_ASSIGNEE_CHANGED",
    "TASK_CREATED",
    "TASK_DESCRIPTION_CHANGED",
    "TASK_DUE_DATE_CHANGED",
    "TASK_EVENTS",
    "TASK_PRIORITY_CHANGED",
    "TASK_STATUS_CHANGED",
    "TASK_TITLE_CHANGED",
    "TASK_UNASSIGNED",
    "activity_type_for",
]
