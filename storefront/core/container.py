"""Centralized dependency injection container (composition root).

Architecture:
    - Application-scoped: @lru_cache() decorated functions (singletons)
    - Adapters are imported inside factories (deferred until needed)
    - Return annotations use protocol types; callers depend on ports only

Usage:
    from storefront.core.container import get_place_order_handler

    handler = get_place_order_handler()
    result = await handler.handle(PlaceOrder(customer_id=..., shipping_address=...))

Tests reset singletons with ``<factory>.cache_clear()``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from storefront.core.config import get_settings

if TYPE_CHECKING:
    from storefront.application.commands.handlers.cancel_order_handler import (
        CancelOrderHandler,
    )
    from storefront.application.commands.handlers.place_order_handler import (
        PlaceOrderHandler,
    )
    from storefront.domain.protocols.cart_repository import CartRepository
    from storefront.domain.protocols.customer_repository import CustomerRepository
    from storefront.domain.protocols.event_bus_protocol import EventBusProtocol
    from storefront.domain.protocols.logger_protocol import LoggerProtocol
    from storefront.domain.protocols.order_repository import OrderRepository
    from storefront.domain.protocols.product_repository import ProductRepository


# ============================================================================
# Infrastructure
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    JSON output when LOG_JSON is set or outside development; colored console
    output otherwise. Every line carries the app name and environment.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from storefront.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.log_json or settings.environment.renders_json_logs
    return ConsoleAdapter(use_json=use_json, level=settings.log_level).bind(
        app=settings.app_name, environment=settings.environment.value
    )


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Handlers are subscribed by the embedding application at startup.
    """
    from storefront.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    return InMemoryEventBus(logger=get_logger())


# ============================================================================
# Repositories
# ============================================================================


@lru_cache()
def get_product_repository() -> "ProductRepository":
    from storefront.infrastructure.persistence.in_memory_repositories import (
        InMemoryProductRepository,
    )

    return InMemoryProductRepository()


@lru_cache()
def get_customer_repository() -> "CustomerRepository":
    from storefront.infrastructure.persistence.in_memory_repositories import (
        InMemoryCustomerRepository,
    )

    return InMemoryCustomerRepository()


@lru_cache()
def get_order_repository() -> "OrderRepository":
    from storefront.infrastructure.persistence.in_memory_repositories import (
        InMemoryOrderRepository,
    )

    return InMemoryOrderRepository()


@lru_cache()
def get_cart_repository() -> "CartRepository":
    from storefront.infrastructure.persistence.in_memory_repositories import (
        InMemoryCartRepository,
    )

    return InMemoryCartRepository()


# ============================================================================
# Command Handlers
# ============================================================================


@lru_cache()
def get_place_order_handler() -> "PlaceOrderHandler":
    """Build a PlaceOrderHandler wired to the singleton adapters."""
    from storefront.application.commands.handlers.place_order_handler import (
        PlaceOrderHandler,
    )

    return PlaceOrderHandler(
        cart_repo=get_cart_repository(),
        product_repo=get_product_repository(),
        order_repo=get_order_repository(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


@lru_cache()
def get_cancel_order_handler() -> "CancelOrderHandler":
    """Build a CancelOrderHandler wired to the singleton adapters."""
    from storefront.application.commands.handlers.cancel_order_handler import (
        CancelOrderHandler,
    )

    return CancelOrderHandler(
        order_repo=get_order_repository(),
        product_repo=get_product_repository(),
        logger=get_logger(),
    )
