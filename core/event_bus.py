"""In-process event bus for schedule mutation outcomes."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Any

EventHandler = Callable[[dict[str, Any]], None]

CREATE_COMMITTED = "create_committed"
CREATE_CANCELLED = "create_cancelled"
EDIT_COMMITTED = "edit_committed"
EDIT_ROLLED_BACK = "edit_rolled_back"


class EventBus:
    """Dispatches mutation events to subscribers by event name."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Register a callback for an event."""
        self._handlers[event_name].append(handler)

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        """Emit an event to all subscribers; handler errors propagate."""
        for handler in list(self._handlers.get(event_name, [])):
            handler({"event": event_name, **payload})
