"""PlaceOrder command handler.

Checks out a shopping cart: reserves stock on every product in the cart,
creates and places the order, then empties the cart.

Architecture:
- Application layer handler (orchestrates several aggregates)
- Imports only from domain layer (entities, protocols, errors)
- Uses Result types for error handling
- Publishes domain events only after everything has been persisted

Flow:
    1. Load the cart (missing, foreign or empty → Failure)
    2. Load every product (missing or soft-deleted → Failure)
    3. Reserve stock on working copies of the products; on any failure the
       copies are dropped and the loaded products stay as they were
    4. Pick an unused order number, create the order from the cart's
       snapshot lines and place it
    5. Persist products, then the emptied cart, then the order. If a write
       fails, aggregates already written are rewritten as loaded
    6. Publish StockReserved and OrderPlaced events
"""

import copy
from typing import cast
from uuid import UUID

from storefront.application.commands.order_commands import PlaceOrder
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities.order import Order
from storefront.domain.entities.product import Product
from storefront.domain.entities.shopping_cart import ShoppingCart
from storefront.domain.errors.domain_exceptions import DomainError, DuplicateItemError
from storefront.domain.protocols.cart_repository import CartRepository
from storefront.domain.protocols.event_bus_protocol import EventBusProtocol
from storefront.domain.protocols.logger_protocol import LoggerProtocol
from storefront.domain.protocols.order_repository import OrderRepository
from storefront.domain.protocols.product_repository import ProductRepository
from storefront.domain.value_objects.order_number import OrderNumber

ORDER_NUMBER_ATTEMPTS = 5


class PlaceOrderError:
    """PlaceOrder-specific errors."""

    CART_NOT_FOUND = "Cart not found"
    CART_NOT_OWNED = "Cart not owned by customer"
    CART_EMPTY = "Cannot place an order from an empty cart"
    PRODUCT_NOT_FOUND = "Product not found"
    PRODUCT_UNAVAILABLE = "Product is no longer available"
    ORDER_NUMBER_CONFLICT = "Could not allocate a unique order number"
    DATABASE_ERROR = "Database error occurred"


class PlaceOrderHandler:
    """Handler for PlaceOrder command.

    Dependencies (injected via constructor):
        - CartRepository: Cart lookup and persistence
        - ProductRepository: Stock reservation persistence
        - OrderRepository: Order number lookup and order persistence
        - EventBusProtocol: For domain events
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: PlaceOrder) -> Result[Order, str]:
        """Handle PlaceOrder command.

        Args:
            cmd: PlaceOrder command with customer and shipping address.

        Returns:
            Success(Order): Order placed (status PROCESSING).
            Failure(error): Cart or product problem, insufficient stock,
                order number conflict or persistence error. Stored products,
                cart and orders are left as they were on failure.

        Side Effects (on success):
            - Decrements stock of every product in the cart
            - Adds the order, empties the cart
            - Publishes StockReserved (per line) and OrderPlaced
        """
        log = self._logger.bind(customer_id=str(cmd.customer_id))

        cart = await self._load_cart(cmd)
        if cart is None or not cart.belongs_to(cmd.customer_id):
            error = (
                PlaceOrderError.CART_NOT_FOUND
                if cart is None
                else PlaceOrderError.CART_NOT_OWNED
            )
            log.warning("place_order_rejected", reason=error)
            return cast(Result[Order, str], Failure(error=error))

        if cart.is_empty():
            log.warning("place_order_rejected", reason=PlaceOrderError.CART_EMPTY)
            return cast(Result[Order, str], Failure(error=PlaceOrderError.CART_EMPTY))

        # Step 2: Load every product before touching any stock
        products: dict[UUID, Product] = {}
        for item in cart.items:
            product = await self._product_repo.find_by_id(item.product_id)
            if product is None or product.is_deleted:
                error = (
                    PlaceOrderError.PRODUCT_NOT_FOUND
                    if product is None
                    else PlaceOrderError.PRODUCT_UNAVAILABLE
                )
                log.warning(
                    "place_order_rejected",
                    reason=error,
                    product_id=str(item.product_id),
                )
                return cast(Result[Order, str], Failure(error=error))
            products[item.product_id] = product

        order_number = await self._unused_order_number()
        if order_number is None:
            log.warning(
                "place_order_rejected", reason=PlaceOrderError.ORDER_NUMBER_CONFLICT
            )
            return cast(
                Result[Order, str], Failure(error=PlaceOrderError.ORDER_NUMBER_CONFLICT)
            )

        # Steps 3-4: Reserve stock on copies and build the order
        reserved = {
            product_id: copy.deepcopy(product) for product_id, product in products.items()
        }
        try:
            for item in cart.items:
                reserved[item.product_id].reserve_stock(item.quantity)

            order = Order.create(
                cmd.customer_id, cmd.shipping_address, order_number=order_number
            )
            for item in cart.items:
                order.add_item(
                    item.product_id, item.product_name, item.unit_price, item.quantity
                )
            order.place()
        except DomainError as e:
            log.warning(
                "place_order_failed",
                reason=e.message,
                error_type=type(e).__name__,
                **e.details,
            )
            return cast(Result[Order, str], Failure(error=e.message))

        emptied = copy.deepcopy(cart)
        emptied.clear()

        # Step 5: Persist, order last
        written: list[Product | ShoppingCart] = []
        try:
            for product_id, product in reserved.items():
                await self._product_repo.update(product)
                written.append(products[product_id])
            await self._cart_repo.update(emptied)
            written.append(cart)
            await self._order_repo.add(order)
        except Exception as e:
            await self._rewrite(written, log)
            if isinstance(e, DuplicateItemError):
                log.warning(
                    "place_order_rejected",
                    reason=PlaceOrderError.ORDER_NUMBER_CONFLICT,
                    order_number=order.order_number.value,
                )
                return cast(
                    Result[Order, str],
                    Failure(error=PlaceOrderError.ORDER_NUMBER_CONFLICT),
                )
            error_msg = f"{PlaceOrderError.DATABASE_ERROR}: {e}"
            log.error("place_order_persist_failed", error=e, order_id=str(order.id))
            return cast(Result[Order, str], Failure(error=error_msg))

        # Step 6: Publish (after persist)
        events = [
            event for product in reserved.values() for event in product.pull_domain_events()
        ]
        events.extend(order.pull_domain_events())
        for event in events:
            await self._event_bus.publish(event)

        log.info(
            "order_placed",
            order_id=str(order.id),
            order_number=order.order_number.value,
            total=str(order.total_amount),
            line_count=len(order.items),
        )
        return Success(value=order)

    async def _load_cart(self, cmd: PlaceOrder) -> ShoppingCart | None:
        if cmd.cart_id is not None:
            return await self._cart_repo.find_by_id(cmd.cart_id)
        return await self._cart_repo.find_by_customer_id(cmd.customer_id)

    async def _unused_order_number(self) -> OrderNumber | None:
        """Generate order numbers until one is not taken yet."""
        for _ in range(ORDER_NUMBER_ATTEMPTS):
            number = OrderNumber.generate()
            if await self._order_repo.find_by_order_number(number) is None:
                return number
        return None

    async def _rewrite(
        self, loaded: list[Product | ShoppingCart], log: LoggerProtocol
    ) -> None:
        """Write back the loaded versions of aggregates saved before a failure."""
        for aggregate in loaded:
            try:
                if isinstance(aggregate, Product):
                    await self._product_repo.update(aggregate)
                else:
                    await self._cart_repo.update(aggregate)
            except Exception as e:
                log.error(
                    "place_order_rollback_failed",
                    error=e,
                    aggregate_type=type(aggregate).__name__,
                    aggregate_id=str(aggregate.id),
                )
