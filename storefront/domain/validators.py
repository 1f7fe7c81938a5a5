"""Centralized argument guards for aggregates.

Guards are pure functions that raise ValidationError on failure and return
the normalized value otherwise, so aggregates can validate every argument
before touching their own state.
"""

from typing import Any
from uuid import UUID

from storefront.domain.errors.domain_exceptions import ValidationError


def require_text(value: Any, message: str, field: str) -> str:
    """Return ``value`` stripped, or raise if it is blank.

    Example:
        >>> require_text("  Mug ", "Product name is required", "name")
        'Mug'
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message, field=field)
    return value.strip()


def require_positive_int(value: Any, message: str, field: str = "quantity") -> int:
    """Return ``value`` if it is an int greater than zero."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(message, field=field, value=value)
    return value


def require_non_negative_int(value: Any, message: str, field: str) -> int:
    """Return ``value`` if it is an int greater than or equal to zero."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(message, field=field, value=value)
    return value


def require_id(value: Any, message: str, field: str) -> UUID:
    """Return ``value`` if it is a non-nil UUID."""
    if not isinstance(value, UUID) or value.int == 0:
        raise ValidationError(message, field=field)
    return value
