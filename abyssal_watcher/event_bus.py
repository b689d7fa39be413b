"""A thread-safe publish/subscribe event bus."""

import threading
from collections import defaultdict
from collections.abc import Callable
from typing import Any

EventHandler = Callable[[Any], None]


class EventBus:
    """Dispatches payloads to the handlers subscribed to an event name."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._handlers: defaultdict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event: str, handler: EventHandler) -> None:
        """Register a handler for the named event."""
        with self._lock:
            self._handlers[event].append(handler)

    def emit(self, event: str, payload: Any) -> None:
        """Call every handler of the event, in subscription order."""
        with self._lock:
            handlers = list(self._handlers.get(event, ()))
        for handler in handlers:
            handler(payload)