"""In-process publish/subscribe bus for domain events."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable, DefaultDict

from app.domain.events import DomainEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class EventBus:
    """Deliver published events to the handlers subscribed to their name.

    Handlers run synchronously in registration order. A handler that raises
    is logged and skipped; the remaining handlers still receive the event and
    the publisher never sees the error.
    """

    def __init__(self) -> None:
        self._handlers: DefaultDict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Register ``handler`` to be invoked whenever ``event_name`` is published."""

        self._handlers[event_name].append(handler)

    def handlers(self, event_name: str) -> tuple[EventHandler, ...]:
        return tuple(self._handlers.get(event_name, ()))

    def publish(self, event: DomainEvent) -> int:
        """Invoke every handler for ``event`` and return how many failed."""

        failures = 0
        for handler in self.handlers(event.name):
            try:
                handler(event)
            except Exception:
                failures += 1
                logger.exception(
                    "Handler %s failed for event %s (task %s)",
                    _handler_name(handler),
                    event.name,
                    event.task_id,
                )
        return failures

    def publish_all(self, events: list[DomainEvent]) -> int:
        return sum(self.publish(event) for event in events)


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


__all__ = ["EventBus", "EventHandler"]
