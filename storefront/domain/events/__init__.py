"""Domain events package.

Usage:
    from storefront.domain.events import OrderPlaced, StockReserved
"""

from storefront.domain.events.base_event import DomainEvent
from storefront.domain.events.order_events import OrderPlaced
from storefront.domain.events.product_events import StockReserved

__all__ = [
    "DomainEvent",
    "OrderPlaced",
    "StockReserved",
]
