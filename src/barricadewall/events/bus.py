"""Synchronous event bus keyed by event type.

Usage:
    bus = EventBus()
    bus.subscribe(EntityBuilt, handler.on_entity_built)
    bus.emit(EntityBuilt(planner, entity))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")

Handler = Callable[[Any], None]


class EventBus:
    """Dispatches events to handlers in subscription order.

    Handlers run inline on the caller's tick. Exceptions raised by a handler
    propagate to whoever emitted the event.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Handler]] = {}

    def subscribe(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type, handler: Handler) -> bool:
        """Remove a handler. Returns False if it was not subscribed."""
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def handlers(self, event_type: type) -> list[Handler]:
        return list(self._handlers.get(event_type, []))

    def emit(self, event: Any) -> int:
        """Deliver an event. Returns the number of handlers it reached."""
        handlers = self.handlers(type(event))
        logger.debug("Emitting %s to %d handler(s)", type(event).__name__, len(handlers))
        for handler in handlers:
            handler(event)
        return len(handlers)
