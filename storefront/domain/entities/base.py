"""Entity and aggregate root building blocks.

Entity:
    Identity-based equality. Two entities are equal when they are of the
    same concrete type and carry the same id, whatever their other fields.

AggregateRoot:
    An entity that is the consistency boundary for its children. It owns a
    transient outbox of domain events produced during its current in-memory
    lifetime. The outbox is not persisted with the aggregate; the
    application layer reads it after a successful save and clears it.

Usage:
    @dataclass(eq=False, kw_only=True)
    class Order(AggregateRoot):
        ...

        def place(self) -> None:
            ...
            self._raise_event(OrderPlaced(...))
"""

from dataclasses import dataclass, field
from uuid import UUID

from storefront.domain.errors.domain_exceptions import ValidationError
from storefront.domain.events.base_event import DomainEvent


@dataclass(eq=False, kw_only=True)
class Entity:
    """Base class for objects distinguished by identity.

    Attributes:
        id: Globally unique, never-nil identifier (uuid7 for new objects).
    """

    id: UUID

    def __post_init__(self) -> None:
        """Validate identity.

        Raises:
            ValidationError: If id is missing, not a UUID or the nil UUID.
        """
        if not isinstance(self.id, UUID) or self.id.int == 0:
            raise ValidationError(
                f"{type(self).__name__} id cannot be empty", entity=type(self).__name__
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        if self is other:
            return True
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self), self.id))


@dataclass(eq=False, kw_only=True)
class AggregateRoot(Entity):
    """Entity owning a transactional boundary and a domain event outbox."""

    _domain_events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False
    )

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Events raised since the aggregate was loaded, in raise order."""
        return tuple(self._domain_events)

    def _raise_event(self, event: DomainEvent) -> None:
        """Append an event to the outbox (aggregate-internal)."""
        self._domain_events.append(event)

    def clear_domain_events(self) -> None:
        """Empty the outbox after the events have been dispatched."""
        self._domain_events.clear()

    def pull_domain_events(self) -> list[DomainEvent]:
        """Return all buffered events and clear the outbox.

        Returns:
            list[DomainEvent]: Events in raise order.
        """
        events = list(self._domain_events)
        self._domain_events.clear()
        return events
