"""Domain errors package.

Exports the exception hierarchy raised by aggregates and value objects, plus
the per-aggregate message constants.

Usage:
    from storefront.domain.errors import InvalidStateError, ValidationError
    from storefront.domain.errors import OrderError
"""

from storefront.domain.errors.cart_error import CartError
from storefront.domain.errors.customer_error import CustomerError
from storefront.domain.errors.domain_exceptions import (
    CurrencyMismatchError,
    DomainError,
    DuplicateItemError,
    InsufficientStockError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from storefront.domain.errors.order_error import OrderError
from storefront.domain.errors.product_error import ProductError
from storefront.domain.errors.value_object_error import ValueObjectError

__all__ = [
    # Exceptions
    "DomainError",
    "ValidationError",
    "InvalidStateError",
    "CurrencyMismatchError",
    "InsufficientStockError",
    "DuplicateItemError",
    "NotFoundError",
    # Message constants
    "CartError",
    "CustomerError",
    "OrderError",
    "ProductError",
    "ValueObjectError",
]
