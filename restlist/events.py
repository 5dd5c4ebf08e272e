"""Event system for tracking changes to the list registry."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from typing import Any

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Types of events that can occur."""

    # Registry events
    LIST_ADDED = auto()
    LIST_REMOVED = auto()
    LIST_UPDATED = auto()
    SELECTION_CHANGED = auto()

    # Operation events
    LISTS_MERGED = auto()


@dataclass
class Event:
    """An event that occurred in the system."""

    type: EventType
    timestamp: datetime
    data: dict[str, Any]

    @property
    def index(self) -> int | None:
        """Get the list index this event refers to, if any."""
        return self.data.get("index")

    @property
    def list_name(self) -> str | None:
        """Get the name of the list this event refers to, if any."""
        restaurant_list = self.data.get("list")
        return restaurant_list.name if restaurant_list is not None else None


class EventBus:
    """Synchronous event bus for publishing and subscribing to events.

    Handlers run in subscription order before ``publish`` returns.
    """

    def __init__(self, history_limit: int = 1000):
        self._subscribers: dict[EventType, list[Callable[[Event], None]]] = {}
        self._history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(
        self, event_type: EventType, handler: Callable[[Event], None]
    ) -> None:
        """Subscribe to events of a specific type."""
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(handler)

    def subscribe_all(self, handler: Callable[[Event], None]) -> None:
        """Subscribe a handler to every event type."""
        for event_type in EventType:
            self.subscribe(event_type, handler)

    def unsubscribe(
        self, event_type: EventType, handler: Callable[[Event], None]
    ) -> None:
        """Unsubscribe from events."""
        if event_type in self._subscribers:
            self._subscribers[event_type].remove(handler)

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribers."""
        self._history.append(event)
        if len(self._history) > self._history_limit:
            self._history = self._history[-self._history_limit :]

        # A failing handler must not starve the ones after it
        for handler in list(self._subscribers.get(event.type, ())):
            try:
                handler(event)
            except Exception:
                logger.exception("Event handler failed for %s", event.type.name)

    def get_history(
        self, event_type: EventType | None = None, limit: int = 100
    ) -> list[Event]:
        """Get event history."""
        history = self._history

        if event_type:
            history = [e for e in history if e.type == event_type]

        return history[-limit:]

    def clear_history(self) -> None:
        """Clear event history."""
        self._history.clear()


class EventPublisher:
    """Mixin for classes that publish events."""

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus

    def _publish_event(self, event_type: EventType, **data) -> None:
        """Publish an event."""
        event = Event(type=event_type, timestamp=datetime.now(), data=data)
        self.event_bus.publish(event)
