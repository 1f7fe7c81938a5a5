"""Event bus protocol (port) for domain events.

The domain defines the port; infrastructure provides adapters.

Implementations:
    - InMemoryEventBus: storefront/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus = get_event_bus()
    >>> async def notify_warehouse(event: OrderPlaced) -> None:
    ...     ...
    >>> event_bus.subscribe(OrderPlaced, notify_warehouse)
    >>> await event_bus.publish(OrderPlaced(order_id=..., customer_id=..., order_number="ORD-20260101-1234"))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from storefront.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async callable invoked with the published event; returns None."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing. Failures are logged, not raised.
        2. **Exact type routing**: Handlers registered for an event type only
           receive events of that exact type.
        3. **No ordering guarantees**: Handlers may run concurrently.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register a handler for an event type.

        Args:
            event_type: Event class to handle (e.g. OrderPlaced).
            handler: Async function called with each published event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to all handlers registered for its type.

        Publishing with no registered handlers is a no-op. Handler exceptions
        are never propagated to the publisher.

        Args:
            event: Domain event to publish.
        """
        ...
