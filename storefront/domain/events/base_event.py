"""Base domain event class.

Domain events represent "things that happened" in the store and are always
named in past tense (OrderPlaced, StockReserved). Aggregates buffer them in
their outbox; the application layer publishes them after persisting.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class OrderPlaced(DomainEvent):
    ...     order_id: UUID
    >>>
    >>> event = OrderPlaced(order_id=uuid7())
    >>> print(event.event_id)  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen dataclasses with kw_only=True
        4. Carry every field their consumers need (consumers never reload
           the aggregate to interpret an event)

    Attributes:
        event_id: Unique identifier for this event instance (deduplication
            by at-least-once consumers).
        occurred_at: When the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Event class name, used as routing key in logs."""
        return type(self).__name__
