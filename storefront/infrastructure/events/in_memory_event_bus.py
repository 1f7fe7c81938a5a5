"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based handler registry.
Suitable for a single process; events are not persisted or distributed.

Architecture:
    - Dictionary-based handler registry (event_type → list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution (asyncio.gather)

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(OrderPlaced, send_confirmation)
    >>> await bus.publish(event)
"""

import asyncio
from collections import defaultdict

from storefront.domain.events.base_event import DomainEvent
from storefront.domain.protocols.event_bus_protocol import EventHandler
from storefront.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Not thread-safe (single-threaded async design).

    Attributes:
        _handlers: Event class → list of async handlers.
        _logger: Logger for publishing and handler failures.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register a handler for an exact event type.

        No duplicate detection: a handler registered twice runs twice.
        """
        self._handlers[event_type].append(handler)

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        """Number of handlers registered for ``event_type``."""
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to all registered handlers.

        Flow:
            1. Look up handlers for type(event)
            2. If no handlers, return immediately (no-op)
            3. Execute all handlers with asyncio.gather(return_exceptions=True)
            4. Log any handler exceptions (warning level)
            5. Return (never raise handler exceptions)
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handlers[idx], "__name__", repr(handlers[idx])),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
