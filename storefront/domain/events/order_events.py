"""Order domain events."""

from dataclasses import dataclass
from uuid import UUID

from storefront.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class OrderPlaced(DomainEvent):
    """Order moved from PENDING to PROCESSING.

    Raised by Order.place() once the placement flow has reserved stock for
    every line. Triggers fulfillment and customer notification downstream.

    Attributes:
        order_id: Placed order.
        customer_id: Customer who placed it.
        order_number: Human-facing order reference (string form).
    """

    order_id: UUID
    customer_id: UUID
    order_number: str
