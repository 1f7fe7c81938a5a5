"""Unit tests for Money value object.

Tests cover:
- Money creation with validation and rounding
- Arithmetic operations (add, multiply and their operators)
- Comparison operations (lt, le, gt, ge)
- Query methods (is_positive, is_zero)
- Factory methods (zero, from_cents)
- Currency validation
- CurrencyMismatchError handling
"""

from decimal import Decimal

import pytest

from storefront.domain.enums.currency import Currency
from storefront.domain.errors import (
    CurrencyMismatchError,
    ValidationError,
    ValueObjectError,
)
from storefront.domain.value_objects.money import Money, validate_currency


def create_money(amount: str | Decimal = "100.00", currency: str = "USD") -> Money:
    """Helper to create Money instances for testing."""
    if isinstance(amount, str):
        amount = Decimal(amount)
    return Money(amount, currency)


# =============================================================================
# Currency Validation Tests
# =============================================================================


@pytest.mark.unit
class TestCurrencyValidation:
    """Test currency validation function."""

    def test_validate_currency_normalizes_case_and_whitespace(self):
        assert validate_currency("usd") == Currency.USD
        assert validate_currency("  Eur ") == Currency.EUR

    def test_validate_currency_passes_enum_through(self):
        assert validate_currency(Currency.GBP) is Currency.GBP

    @pytest.mark.parametrize("code", ["", None, "XYZ", "US"])
    def test_validate_currency_rejects_unknown_codes(self, code):
        with pytest.raises(ValidationError) as exc_info:
            validate_currency(code)  # type: ignore[arg-type]
        assert exc_info.value.message == ValueObjectError.INVALID_CURRENCY


# =============================================================================
# Money Creation Tests
# =============================================================================


@pytest.mark.unit
class TestMoneyCreation:
    """Test Money value object creation."""

    def test_money_created_with_decimal_and_currency(self):
        money = Money(Decimal("100.50"), "USD")
        assert money.amount == Decimal("100.50")
        assert money.currency == Currency.USD

    def test_money_accepts_int_float_and_str_amounts(self):
        assert Money(5, "USD").amount == Decimal("5.00")
        assert Money(0.1, "USD").amount == Decimal("0.10")
        assert Money("7.25", "USD").amount == Decimal("7.25")

    def test_money_rounds_half_to_even_at_construction(self):
        """Midpoints go to the even cent (banker's rounding)."""
        assert Money(Decimal("15.005"), "USD").amount == Decimal("15.00")
        assert Money(Decimal("15.015"), "USD").amount == Decimal("15.02")
        assert Money(Decimal("15.004"), "USD").amount == Decimal("15.00")
        assert Money(Decimal("15.006"), "USD").amount == Decimal("15.01")
        assert Money(15.005, "USD").amount == Decimal("15.00")

    def test_money_amount_always_has_two_decimal_places(self):
        assert Money(Decimal("3"), "USD").amount.as_tuple().exponent == -2
        assert Money(Decimal("1.23456"), "USD").amount.as_tuple().exponent == -2

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValidationError) as exc_info:
            create_money("-0.01")
        assert exc_info.value.message == ValueObjectError.NEGATIVE_AMOUNT

    def test_validation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            create_money("-1")

    @pytest.mark.parametrize("amount", ["abc", "NaN", "Infinity", True, None])
    def test_money_rejects_non_numeric_amounts(self, amount):
        with pytest.raises(ValidationError) as exc_info:
            Money(amount, "USD")  # type: ignore[arg-type]
        assert exc_info.value.message == ValueObjectError.INVALID_AMOUNT

    def test_money_rejects_unknown_currency(self):
        with pytest.raises(ValidationError):
            create_money("1.00", "ABC")

    def test_money_is_immutable(self):
        money = create_money()
        with pytest.raises(AttributeError):
            money.amount = Decimal("1")  # type: ignore[misc]

    def test_money_equality_and_hash_by_value(self):
        assert create_money("1.50") == Money(Decimal("1.500"), "usd")
        assert hash(create_money("1.50")) == hash(create_money("1.50"))
        assert create_money("1.50") != create_money("1.50", "EUR")


# =============================================================================
# Arithmetic Tests
# =============================================================================


@pytest.mark.unit
class TestMoneyArithmetic:
    """Test add and multiply."""

    def test_add_returns_new_money(self):
        a = create_money("10.25")
        b = create_money("4.80")
        result = a.add(b)
        assert result == create_money("15.05")
        assert a == create_money("10.25")

    def test_add_is_commutative(self):
        a = create_money("3.10")
        b = create_money("7.95")
        assert a + b == b + a

    def test_add_different_currency_raises(self):
        with pytest.raises(CurrencyMismatchError) as exc_info:
            create_money("1", "USD").add(create_money("1", "EUR"))
        assert exc_info.value.currency1 == "USD"
        assert exc_info.value.currency2 == "EUR"

    def test_multiply_by_quantity(self):
        assert create_money("2.50").multiply(3) == create_money("7.50")
        assert create_money("2.50") * 2 == create_money("5.00")
        assert 2 * create_money("2.50") == create_money("5.00")

    def test_multiply_by_one_is_identity(self):
        money = create_money("19.99")
        assert money.multiply(1) == money

    def test_multiply_by_zero_gives_zero(self):
        assert create_money("19.99").multiply(0).is_zero()

    @pytest.mark.parametrize("factor", [-1, 1.5, True])
    def test_multiply_rejects_invalid_factor(self, factor):
        with pytest.raises(ValidationError):
            create_money().multiply(factor)  # type: ignore[arg-type]

    def test_multiply_operator_rejects_float(self):
        with pytest.raises(TypeError):
            create_money() * 1.5  # type: ignore[operator]


# =============================================================================
# Comparison Tests
# =============================================================================


@pytest.mark.unit
class TestMoneyComparison:
    """Test ordering operators."""

    def test_ordering_same_currency(self):
        small = create_money("1.00")
        large = create_money("2.00")
        assert small < large
        assert small <= large
        assert large > small
        assert large >= small
        assert small <= create_money("1.00")

    @pytest.mark.parametrize("op", ["__lt__", "__le__", "__gt__", "__ge__"])
    def test_comparison_across_currencies_raises(self, op):
        with pytest.raises(CurrencyMismatchError):
            getattr(create_money("1", "USD"), op)(create_money("1", "EUR"))


# =============================================================================
# Query, Factory and Formatting Tests
# =============================================================================


@pytest.mark.unit
class TestMoneyQueriesAndFactories:
    def test_zero_defaults_to_usd(self):
        zero = Money.zero()
        assert zero.is_zero()
        assert zero.currency == Currency.USD

    def test_zero_in_given_currency(self):
        assert Money.zero("EUR").currency == Currency.EUR

    def test_is_positive(self):
        assert create_money("0.01").is_positive()
        assert not Money.zero().is_positive()

    def test_from_cents(self):
        assert Money.from_cents(1999, "USD") == create_money("19.99")

    def test_str_uses_thousands_separator(self):
        assert str(create_money("1234.5")) == "1,234.50 USD"

    def test_repr(self):
        assert repr(create_money("15.01")) == "Money(amount=Decimal('15.01'), currency='USD')"
