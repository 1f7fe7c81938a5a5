"""Domain exception hierarchy.

Two kinds of failure exist in the domain core:

- ValidationError: an operation received an out-of-contract argument
  (blank required string, negative amount or quantity, malformed email/SKU).
- InvalidStateError: the aggregate's current status or contents forbid the
  operation (wrong order status, missing line, insufficient stock,
  currency mismatch, duplicate line).

Both are raised synchronously at the point of violation and propagate to the
caller. Aggregates check every precondition before mutating, so a raised
error never leaves a partially modified aggregate behind.

Usage:
    from storefront.domain.errors import InvalidStateError, OrderError

    if self.status != OrderStatus.PENDING:
        raise InvalidStateError(OrderError.NOT_PENDING, status=self.status.value)
"""

from typing import Any
from uuid import UUID


class DomainError(Exception):
    """Base exception for all domain-level errors.

    Attributes:
        message: Human-readable message.
        details: Structured context (safe to log).
    """

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(DomainError, ValueError):
    """An argument violates the contract of a constructor or operation.

    Subclasses ValueError so generic callers catching ValueError keep working.
    """


class InvalidStateError(DomainError):
    """The operation is not allowed in the aggregate's current state."""


class CurrencyMismatchError(InvalidStateError):
    """Raised when attempting operations on different currencies."""

    def __init__(self, currency1: str, currency2: str) -> None:
        """Initialize currency mismatch error.

        Args:
            currency1: First currency code.
            currency2: Second currency code.
        """
        super().__init__(
            f"Cannot perform operation between {currency1} and {currency2}",
            currency1=currency1,
            currency2=currency2,
        )
        self.currency1 = currency1
        self.currency2 = currency2


class InsufficientStockError(InvalidStateError):
    """Raised when a reservation exceeds the available stock."""

    def __init__(
        self, product_id: UUID, product_name: str, available: int, requested: int
    ) -> None:
        super().__init__(
            f"Insufficient stock for '{product_name}'. "
            f"Available: {available}, Requested: {requested}.",
            product_id=str(product_id),
            available=available,
            requested=requested,
        )
        self.product_id = product_id
        self.available = available
        self.requested = requested


class DuplicateItemError(InvalidStateError):
    """Raised when a line (or variant SKU) already exists in the aggregate."""


class NotFoundError(InvalidStateError):
    """Raised when a child line or variant is not part of the aggregate."""
