"""Unit tests for the Order aggregate.

Tests cover:
- Creation (order number generation, customer validation)
- Adding lines (duplicates, currency, quantity, state)
- Total consistency
- State machine transitions and OrderPlaced
"""

from decimal import Decimal
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from storefront.domain.entities.order import Order
from storefront.domain.enums import OrderStatus
from storefront.domain.errors import (
    CurrencyMismatchError,
    DuplicateItemError,
    InvalidStateError,
    OrderError,
    ValidationError,
)
from storefront.domain.events import OrderPlaced
from storefront.domain.value_objects import Money
from tests.conftest import create_address, create_order, usd


def placed_order() -> Order:
    order = create_order()
    order.add_item(uuid7(), "Mug", usd("10"), 1)
    order.place()
    order.clear_domain_events()
    return order


def order_in(status: OrderStatus) -> Order:
    """Drive an order to ``status`` through legal transitions."""
    order = create_order()
    if status == OrderStatus.PENDING:
        return order
    if status == OrderStatus.CANCELLED:
        order.cancel()
        return order
    order = placed_order()
    if status in (OrderStatus.SHIPPED, OrderStatus.DELIVERED):
        order.mark_as_shipped()
    if status == OrderStatus.DELIVERED:
        order.mark_as_delivered()
    return order


@pytest.mark.unit
class TestOrderCreation:
    def test_create_defaults(self):
        customer_id = uuid7()
        order = Order.create(customer_id, create_address())

        assert order.customer_id == customer_id
        assert order.status == OrderStatus.PENDING
        assert order.items == ()
        assert order.total_amount == Money.zero("USD")
        assert order.order_number.value.startswith("ORD-")

    def test_create_with_explicit_order_number(self):
        order = create_order(order_number="ORD-20260101-1234")
        assert order.order_number.value == "ORD-20260101-1234"

    def test_nil_customer_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Order.create(UUID(int=0), create_address())
        assert exc_info.value.message == OrderError.CUSTOMER_REQUIRED

    def test_belongs_to(self):
        owner = uuid7()
        order = create_order(customer_id=owner)
        assert order.belongs_to(owner)
        assert not order.belongs_to(uuid7())


@pytest.mark.unit
class TestOrderItems:
    def test_add_item_snapshots_and_totals(self):
        order = create_order()
        item = order.add_item(uuid7(), "Mug", usd("10.00"), 2)

        assert item.order_id == order.id
        assert item.line_total == usd("20.00")
        assert order.total_amount == usd("20.00")

    def test_total_equals_sum_of_lines(self):
        order = create_order()
        order.add_item(uuid7(), "Mug", usd("10.00"), 2)
        order.add_item(uuid7(), "Tea", usd("3.33"), 3)
        order.add_item(uuid7(), "Spoon", usd("0.01"), 7)

        expected = sum((i.line_total.amount for i in order.items), Decimal("0"))
        assert order.total_amount.amount == expected == Decimal("30.06")

    def test_rounding_happens_at_money_construction(self):
        order = create_order()
        order.add_item(uuid7(), "Mug", Money(Decimal("15.005"), "USD"), 1)
        order.add_item(uuid7(), "Tea", Money(Decimal("2.015"), "USD"), 1)
        assert order.total_amount == usd("17.02")

    def test_duplicate_product_rejected(self):
        order = create_order()
        product_id = uuid7()
        order.add_item(product_id, "Mug", usd("1"), 1)

        with pytest.raises(DuplicateItemError):
            order.add_item(product_id, "Mug", usd("1"), 2)
        assert len(order.items) == 1
        assert order.total_amount == usd("1")

    def test_mixed_currency_rejected(self):
        order = create_order()
        order.add_item(uuid7(), "Mug", usd("1"), 1)
        with pytest.raises(CurrencyMismatchError):
            order.add_item(uuid7(), "Tea", Money("1", "GBP"), 1)

    def test_order_in_other_currency_totals_in_that_currency(self):
        order = create_order()
        order.add_item(uuid7(), "Tea", Money("2.50", "EUR"), 2)
        assert order.total_amount == Money("5.00", "EUR")

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(ValidationError):
            create_order().add_item(uuid7(), "Mug", usd("1"), quantity)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            create_order().add_item(uuid7(), "", usd("1"), 1)

    def test_add_item_after_placement_rejected(self):
        order = placed_order()
        with pytest.raises(InvalidStateError) as exc_info:
            order.add_item(uuid7(), "Tea", usd("1"), 1)
        assert exc_info.value.message == OrderError.NOT_PENDING


@pytest.mark.unit
class TestOrderPlacement:
    def test_place_empty_order_fails(self):
        order = create_order()
        with pytest.raises(InvalidStateError) as exc_info:
            order.place()
        assert exc_info.value.message == OrderError.EMPTY_ORDER
        assert order.status == OrderStatus.PENDING
        assert order.domain_events == ()

    def test_place_transitions_and_raises_one_event(self):
        order = create_order()
        order.add_item(uuid7(), "Mug", usd("10"), 1)

        order.place()

        assert order.status == OrderStatus.PROCESSING
        events = order.pull_domain_events()
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, OrderPlaced)
        assert event.order_id == order.id
        assert event.customer_id == order.customer_id
        assert event.order_number == order.order_number.value

    def test_place_twice_fails(self):
        order = placed_order()
        with pytest.raises(InvalidStateError):
            order.place()
        assert order.domain_events == ()

    def test_other_transitions_raise_no_events(self):
        order = placed_order()
        order.mark_as_shipped()
        order.mark_as_delivered()
        assert order.domain_events == ()


@pytest.mark.unit
class TestOrderTransitionMatrix:
    @pytest.mark.parametrize(
        ("status", "allowed"),
        [
            (OrderStatus.PENDING, True),
            (OrderStatus.PROCESSING, True),
            (OrderStatus.SHIPPED, False),
            (OrderStatus.DELIVERED, False),
            (OrderStatus.CANCELLED, False),
        ],
    )
    def test_cancel(self, status, allowed):
        order = order_in(status)
        assert order.is_cancellable() is allowed
        if allowed:
            order.cancel()
            assert order.status == OrderStatus.CANCELLED
        else:
            with pytest.raises(InvalidStateError) as exc_info:
                order.cancel()
            assert exc_info.value.message == OrderError.CANNOT_CANCEL
            assert order.status == status

    @pytest.mark.parametrize("status", list(OrderStatus))
    def test_mark_as_shipped_only_from_processing(self, status):
        order = order_in(status)
        if status == OrderStatus.PROCESSING:
            order.mark_as_shipped()
            assert order.status == OrderStatus.SHIPPED
        else:
            with pytest.raises(InvalidStateError):
                order.mark_as_shipped()
            assert order.status == status

    @pytest.mark.parametrize("status", list(OrderStatus))
    def test_mark_as_delivered_only_from_shipped(self, status):
        order = order_in(status)
        if status == OrderStatus.SHIPPED:
            order.mark_as_delivered()
            assert order.status == OrderStatus.DELIVERED
        else:
            with pytest.raises(InvalidStateError) as exc_info:
                order.mark_as_delivered()
            assert exc_info.value.message == OrderError.CANNOT_DELIVER
