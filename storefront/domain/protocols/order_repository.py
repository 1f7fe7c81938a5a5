"""OrderRepository protocol for order persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from storefront.domain.entities.order import Order
from storefront.domain.value_objects.order_number import OrderNumber


class OrderRepository(Protocol):
    """Order repository protocol (port)."""

    async def find_by_id(self, order_id: UUID) -> Order | None:
        """Find order by ID."""
        ...

    async def find_by_order_number(self, order_number: OrderNumber | str) -> Order | None:
        """Find order by its human-facing number."""
        ...

    async def find_by_customer_id(self, customer_id: UUID) -> list[Order]:
        """List a customer's orders, newest first."""
        ...

    async def list_all(self) -> list[Order]:
        ...

    async def add(self, order: Order) -> None:
        """Persist a new order.

        Raises:
            DuplicateItemError: If the id or order number is already stored.
        """
        ...

    async def update(self, order: Order) -> None:
        """Persist changes to an existing order.

        Raises:
            NotFoundError: If the order does not exist.
        """
        ...
