"""CancelOrder command handler.

Cancels an order on behalf of its owner and returns reserved stock to the
catalog.

Architecture:
- Application layer handler
- Uses Result types for error handling
- Stock is only given back for orders that had reserved it (PROCESSING)
- Cancellation and restocking happen on working copies; the loaded
  aggregates stay untouched until every write has succeeded
"""

import copy
from typing import cast

from storefront.application.commands.order_commands import CancelOrder
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities.order import Order
from storefront.domain.entities.product import Product
from storefront.domain.enums.order_status import OrderStatus
from storefront.domain.errors.order_error import OrderError
from storefront.domain.protocols.logger_protocol import LoggerProtocol
from storefront.domain.protocols.order_repository import OrderRepository
from storefront.domain.protocols.product_repository import ProductRepository


class CancelOrderError:
    """CancelOrder-specific errors."""

    ORDER_NOT_FOUND = "Order not found"
    NOT_OWNED_BY_CUSTOMER = "Order not owned by customer"
    DATABASE_ERROR = "Database error occurred"


class CancelOrderHandler:
    """Handler for CancelOrder command.

    Dependencies (injected via constructor):
        - OrderRepository: Order lookup and persistence
        - ProductRepository: Stock restoration
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._logger = logger

    async def handle(self, cmd: CancelOrder) -> Result[Order, str]:
        """Handle CancelOrder command.

        Returns:
            Success(Order): Order cancelled.
            Failure(error): Order not found, not owned, not cancellable
                (shipped, delivered or already cancelled) or database error.
                On a database error the stored order and products are left
                as they were loaded, so the command can be retried.

        Side Effects (on success):
            - Order status becomes CANCELLED
            - Stock restored for every line whose product still exists,
              when the order had been placed
        """
        log = self._logger.bind(
            order_id=str(cmd.order_id), customer_id=str(cmd.customer_id)
        )

        order = await self._order_repo.find_by_id(cmd.order_id)
        if order is None:
            log.warning("cancel_order_rejected", reason=CancelOrderError.ORDER_NOT_FOUND)
            return cast(Result[Order, str], Failure(error=CancelOrderError.ORDER_NOT_FOUND))

        if not order.belongs_to(cmd.customer_id):
            log.warning(
                "cancel_order_rejected", reason=CancelOrderError.NOT_OWNED_BY_CUSTOMER
            )
            return cast(
                Result[Order, str], Failure(error=CancelOrderError.NOT_OWNED_BY_CUSTOMER)
            )

        if not order.is_cancellable():
            log.warning(
                "cancel_order_rejected",
                reason=OrderError.CANNOT_CANCEL,
                status=order.status.value,
            )
            return cast(Result[Order, str], Failure(error=OrderError.CANNOT_CANCEL))

        stock_was_reserved = order.status == OrderStatus.PROCESSING
        cancelled = copy.deepcopy(order)
        cancelled.cancel()

        # Load every product before writing anything
        loaded: list[Product] = []
        restocked: list[Product] = []
        if stock_was_reserved:
            for item in order.items:
                product = await self._product_repo.find_by_id(item.product_id)
                if product is None:
                    log.warning("stock_restore_skipped", product_id=str(item.product_id))
                    continue
                working = copy.deepcopy(product)
                working.restore_stock(item.quantity)
                loaded.append(product)
                restocked.append(working)

        written: list[Product] = []
        try:
            for original, working in zip(loaded, restocked, strict=True):
                await self._product_repo.update(working)
                written.append(original)
            await self._order_repo.update(cancelled)
        except Exception as e:
            await self._rewrite(written, log)
            error_msg = f"{CancelOrderError.DATABASE_ERROR}: {e}"
            log.error("cancel_order_persist_failed", error=e)
            return cast(Result[Order, str], Failure(error=error_msg))

        log.info(
            "order_cancelled",
            order_number=cancelled.order_number.value,
            stock_restored=stock_was_reserved,
        )
        return Success(value=cancelled)

    async def _rewrite(self, loaded: list[Product], log: LoggerProtocol) -> None:
        """Write back the loaded versions of products saved before a failure."""
        for product in loaded:
            try:
                await self._product_repo.update(product)
            except Exception as e:
                log.error(
                    "cancel_order_rollback_failed", error=e, product_id=str(product.id)
                )
