"""Command handlers."""

from storefront.application.commands.handlers.cancel_order_handler import (
    CancelOrderError,
    CancelOrderHandler,
)
from storefront.application.commands.handlers.place_order_handler import (
    PlaceOrderError,
    PlaceOrderHandler,
)

__all__ = [
    "CancelOrderError",
    "CancelOrderHandler",
    "PlaceOrderError",
    "PlaceOrderHandler",
]
