"""In-process domain event publisher.

Dispatches each published event synchronously to the handlers subscribed to
its type or to any of its base types.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Callable, Dict, List, Optional, Type

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], None]


@dataclass
class PublisherMetrics:
    """Event publishing metrics."""
    total_published: int = 0
    handler_calls: int = 0
    failed_handler_calls: int = 0
    last_publish_time: Optional[datetime] = None
    last_error: Optional[str] = None


class SimpleDomainEventPublisher:
    """Synchronous, in-memory implementation of DomainEventPublisher.

    Args:
        raise_errors: Re-raise the first handler failure instead of logging it
    """

    def __init__(self, raise_errors: bool = False):
        self._handlers: Dict[Type[Any], List[EventHandler]] = {}
        self._lock = Lock()
        self._raise_errors = raise_errors
        self._metrics = PublisherMetrics()

    def subscribe(self, event_type: Type[Any], handler: EventHandler) -> None:
        """Subscribe ``handler`` to events of ``event_type`` and its subclasses."""
        with self._lock:
            self._handlers.setdefault(event_type, []).append(handler)

        logger.debug(f"Subscribed {getattr(handler, '__name__', handler)!r} to {event_type.__name__}")

    def unsubscribe(self, event_type: Type[Any], handler: EventHandler) -> None:
        with self._lock:
            handlers = self._handlers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

    def handlers_for(self, event: Any) -> List[EventHandler]:
        """Get the handlers interested in ``event`` in subscription order by type MRO."""
        with self._lock:
            snapshot = {key: list(value) for key, value in self._handlers.items()}

        handlers: List[EventHandler] = []
        for klass in type(event).__mro__:
            handlers.extend(snapshot.get(klass, []))
        return handlers

    def publish(self, event: Any) -> None:
        """Dispatch ``event`` to its handlers."""
        self._metrics.total_published += 1
        self._metrics.last_publish_time = datetime.now(timezone.utc)

        for handler in self.handlers_for(event):
            self._metrics.handler_calls += 1
            try:
                handler(event)
            except Exception as e:
                self._metrics.failed_handler_calls += 1
                self._metrics.last_error = str(e)
                if self._raise_errors:
                    raise
                logger.exception(
                    f"Handler {getattr(handler, '__name__', handler)!r} failed for {type(event).__name__}"
                )

    def get_metrics(self) -> PublisherMetrics:
        return self._metrics
