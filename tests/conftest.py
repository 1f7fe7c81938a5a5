"""Shared pytest fixtures and builders.

Builders create valid aggregates with sensible defaults so each test only
spells out the fields it cares about.
"""

from decimal import Decimal

import pytest

from storefront.core import container
from storefront.core.config import get_settings
from storefront.domain.entities.customer import Customer
from storefront.domain.entities.order import Order
from storefront.domain.entities.product import Product
from storefront.domain.value_objects.address import Address
from storefront.domain.value_objects.money import Money
from storefront.domain.value_objects.order_number import OrderNumber

_sku_counter = 0


def usd(amount: str | int = "10.00") -> Money:
    """Helper to create USD Money from a string amount."""
    return Money(Decimal(str(amount)), "USD")


def create_address(**overrides: str) -> Address:
    fields = {
        "street": "1 Main Street",
        "city": "Springfield",
        "country": "US",
        "postal_code": "12345",
    }
    fields.update(overrides)
    return Address(**fields)


def create_product(
    name: str = "Espresso Cup",
    price: Money | None = None,
    stock: int = 10,
    category: str = "Kitchen",
    sku: str | None = None,
) -> Product:
    """Helper to create a Product; SKUs are unique per call by default."""
    global _sku_counter
    _sku_counter += 1
    return Product.create(
        name=name,
        description="Porcelain",
        price=price or usd("10.00"),
        category=category,
        initial_stock=stock,
        sku=sku or f"SKU-{_sku_counter:05d}",
    )


def create_customer(email: str = "jane@example.com") -> Customer:
    return Customer.create("Jane", "Doe", email, "hashed-password")


def create_order(customer_id=None, order_number: str | None = None) -> Order:
    """Helper to create a PENDING Order without lines."""
    from uuid_extensions import uuid7

    return Order.create(
        customer_id or uuid7(),
        create_address(),
        order_number=OrderNumber(order_number) if order_number else None,
    )


@pytest.fixture(autouse=True)
def reset_singletons():
    """Clear cached settings and container singletons around each test."""
    factories = (
        get_settings,
        container.get_logger,
        container.get_event_bus,
        container.get_product_repository,
        container.get_customer_repository,
        container.get_order_repository,
        container.get_cart_repository,
        container.get_place_order_handler,
        container.get_cancel_order_handler,
    )
    for factory in factories:
        factory.cache_clear()
    yield
    for factory in factories:
        factory.cache_clear()
