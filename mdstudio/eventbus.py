"""A small thread-safe publish/subscribe event bus."""

from __future__ import annotations

import threading
from collections import defaultdict
from typing import Any, Callable

Handler = Callable[[Any], None]


class EventBus:
    """Delivers published payloads to subscribers, each in its own thread."""

    def __init__(self) -> None:
        self._subscribers: defaultdict[str, list[Handler]] = defaultdict(list)
        self._lock = threading.RLock()

    def subscribe(self, event: str, handler: Handler) -> None:
        """Add ``handler`` to the handlers of ``event``."""
        with self._lock:
            self._subscribers[event].append(handler)

    def unsubscribe(self, event: str, handler: Handler) -> None:
        """Remove the first registration of ``handler`` for ``event``, if any."""
        with self._lock:
            handlers = self._subscribers.get(event)
            if not handlers:
                return
            for position, registered in enumerate(handlers):
                if registered == handler:
                    del handlers[position]
                    break

    def publish(self, event: str, payload: Any = None) -> list[threading.Thread]:
        """Run every handler of ``event`` concurrently; return the started threads."""
        with self._lock:
            handlers = list(self._subscribers.get(event, ()))
        threads = [
            threading.Thread(target=handler, args=(payload,), daemon=True)
            for handler in handlers
        ]
        for thread in threads:
            thread.start()
        return threads