"""Domain enums for business logic.

Available Enums:
    - Currency: Supported ISO 4217 currency codes
    - OrderStatus: Order lifecycle state machine
"""

from storefront.domain.enums.currency import DEFAULT_CURRENCY, Currency
from storefront.domain.enums.order_status import OrderStatus

__all__ = [
    "Currency",
    "DEFAULT_CURRENCY",
    "OrderStatus",
]
