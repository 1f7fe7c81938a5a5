"""Immutable Money value object with Decimal precision.

Prices and totals must be exact - floats introduce rounding errors that
accumulate across order lines. This module provides a non-negative Money
value object using Python's Decimal type, rounded to cents on construction.

Error Handling:
    Arithmetic or ordering between different currencies raises
    CurrencyMismatchError. A comparison across currencies never silently
    returns False.

Usage:
    from decimal import Decimal
    from storefront.domain.value_objects import Money

    price = Money(Decimal("9.99"), "USD")
    line_total = price.multiply(3)  # Money(29.97, USD)
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Self

from storefront.domain.enums.currency import DEFAULT_CURRENCY, Currency
from storefront.domain.errors.domain_exceptions import (
    CurrencyMismatchError,
    ValidationError,
)
from storefront.domain.errors.value_object_error import ValueObjectError

CENTS = Decimal("0.01")


def validate_currency(code: Currency | str) -> Currency:
    """Validate and normalize a currency code.

    Args:
        code: Currency enum member or ISO code (case-insensitive).

    Returns:
        Matching Currency member.

    Raises:
        ValidationError: If code is empty or not a supported currency.

    Example:
        >>> validate_currency("usd")
        <Currency.USD: 'USD'>
    """
    if isinstance(code, Currency):
        return code
    if not code or not isinstance(code, str):
        raise ValidationError(ValueObjectError.INVALID_CURRENCY, currency=code)
    try:
        return Currency(code.strip().upper())
    except ValueError as e:
        raise ValidationError(ValueObjectError.INVALID_CURRENCY, currency=code) from e


@dataclass(frozen=True)
class Money:
    """Immutable, non-negative monetary value with currency.

    Attributes:
        amount: Decimal value, >= 0, exactly 2 decimal places.
        currency: Currency of the amount.

    Immutability:
        Frozen dataclass ensures Money cannot be modified after creation.
        All arithmetic operations return new Money instances.

    Rounding:
        Amounts are quantized to cents with banker's rounding (ROUND_HALF_EVEN)
        when the value is created, never later when totals are computed.

    Example:
        >>> Money(Decimal("15.005"), "USD")
        Money(amount=Decimal('15.00'), currency='USD')
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        """Validate, round and normalize after initialization.

        Raises:
            ValidationError: If the amount is not a finite, non-negative
                number or the currency is unsupported.
        """
        amount = self.amount
        if isinstance(amount, bool):
            raise ValidationError(ValueObjectError.INVALID_AMOUNT, amount=amount)
        if not isinstance(amount, Decimal):
            try:
                # str() keeps 15.005 as written instead of its binary float value
                amount = Decimal(str(amount))
            except (InvalidOperation, TypeError, ValueError) as e:
                raise ValidationError(
                    ValueObjectError.INVALID_AMOUNT, amount=str(self.amount)
                ) from e

        if amount.is_nan() or amount.is_infinite():
            raise ValidationError(ValueObjectError.INVALID_AMOUNT, amount=str(amount))
        if amount < 0:
            raise ValidationError(ValueObjectError.NEGATIVE_AMOUNT, amount=str(amount))

        rounded = amount.quantize(CENTS, rounding=ROUND_HALF_EVEN)
        object.__setattr__(self, "amount", rounded)
        object.__setattr__(self, "currency", validate_currency(self.currency))

    # -------------------------------------------------------------------------
    # Arithmetic Operations (Same Currency Only)
    # -------------------------------------------------------------------------

    def add(self, other: "Money") -> "Money":
        """Add two Money values.

        Args:
            other: Money to add.

        Returns:
            New Money with the sum; operands are unchanged.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, quantity: int) -> "Money":
        """Multiply by a non-negative integer quantity.

        Args:
            quantity: Number of units.

        Returns:
            New Money with the scaled amount.

        Raises:
            ValidationError: If quantity is negative or not an int.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            raise ValidationError(ValueObjectError.NEGATIVE_MULTIPLIER, quantity=quantity)
        return Money(self.amount * quantity, self.currency)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __mul__(self, quantity: int) -> "Money":
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            return NotImplemented
        return self.multiply(quantity)

    def __rmul__(self, quantity: int) -> "Money":
        return self.__mul__(quantity)

    # -------------------------------------------------------------------------
    # Comparison Operations (Same Currency Only)
    # -------------------------------------------------------------------------

    def __lt__(self, other: "Money") -> bool:
        """Less than comparison.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        """Less than or equal comparison.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        """Greater than comparison.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        """Greater than or equal comparison.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount >= other.amount

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == 0

    def is_positive(self) -> bool:
        """Check if amount is greater than zero."""
        return self.amount > 0

    def same_currency_as(self, other: "Money") -> bool:
        """Check whether ``other`` is expressed in the same currency."""
        return self.currency == other.currency

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, currency: Currency | str = DEFAULT_CURRENCY) -> Self:
        """Create Money with zero amount.

        Args:
            currency: Currency code (default: USD).

        Returns:
            Money with zero amount in specified currency.
        """
        return cls(Decimal("0"), currency)

    @classmethod
    def from_cents(cls, cents: int, currency: Currency | str = DEFAULT_CURRENCY) -> Self:
        """Create Money from an integer number of cents.

        Example:
            >>> Money.from_cents(1999, "USD")
            Money(amount=Decimal('19.99'), currency='USD')
        """
        return cls(Decimal(cents) / Decimal("100"), currency)

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Money(amount={self.amount!r}, currency={self.currency.value!r})"

    def __str__(self) -> str:
        """Return human-readable string like "1,234.56 USD"."""
        return f"{self.amount:,.2f} {self.currency.value}"

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _check_same_currency(self, other: "Money") -> None:
        """Verify currencies match for operations.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency.value, other.currency.value)
