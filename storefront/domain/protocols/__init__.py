"""Domain protocols (ports) implemented by infrastructure adapters."""

from storefront.domain.protocols.cart_repository import CartRepository
from storefront.domain.protocols.customer_repository import CustomerRepository
from storefront.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from storefront.domain.protocols.logger_protocol import LoggerProtocol
from storefront.domain.protocols.order_repository import OrderRepository
from storefront.domain.protocols.product_repository import ProductRepository

__all__ = [
    "CartRepository",
    "CustomerRepository",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "OrderRepository",
    "ProductRepository",
]
