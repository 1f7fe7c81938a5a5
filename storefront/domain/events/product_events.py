"""Product (catalog/stock) domain events."""

from dataclasses import dataclass
from uuid import UUID

from storefront.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class StockReserved(DomainEvent):
    """Stock was reserved for an order line.

    Attributes:
        product_id: Product whose stock decreased.
        quantity: Units reserved.
    """

    product_id: UUID
    quantity: int
