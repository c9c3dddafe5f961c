"""
Outbound notification queue

The engine never calls a renderer directly. Operations emit events here; a
render layer either subscribes (called synchronously on emit) or drains the
queue after an action completes. While anyone is subscribed, events go
straight to the subscribers and are not kept for draining.
"""

import logging
from collections import deque
from typing import Callable, List

from garden.models.events import GardenEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[GardenEvent], None]


class EventQueue:
    """FIFO of pending events plus optional subscribers"""

    def __init__(self):
        self._pending: deque = deque()
        self._subscribers: List[EventHandler] = []

    def subscribe(self, handler: EventHandler) -> None:
        if handler not in self._subscribers:
            self._subscribers.append(handler)

    def unsubscribe(self, handler: EventHandler) -> None:
        if handler in self._subscribers:
            self._subscribers.remove(handler)

    def emit(self, event: GardenEvent) -> None:
        """Deliver an event to subscribers, or queue it when there are none"""
        logger.debug(f"Emitted {event.kind}: {event}")

        if not self._subscribers:
            self._pending.append(event)
            return

        for handler in list(self._subscribers):
            try:
                handler(event)
            except Exception as e:
                # Subscriber failures never reach the engine operation
                logger.error(f"Event handler {handler!r} failed on {event.kind}: {e}", exc_info=True)

    def drain(self) -> List[GardenEvent]:
        """Return and clear all pending events"""
        events = list(self._pending)
        self._pending.clear()
        return events

    def __len__(self) -> int:
        return len(self._pending)
