"""CartRepository protocol for shopping cart persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from storefront.domain.entities.shopping_cart import ShoppingCart


class CartRepository(Protocol):
    """Shopping cart repository protocol (port).

    A customer has at most one cart.
    """

    async def find_by_id(self, cart_id: UUID) -> ShoppingCart | None:
        """Find cart by ID."""
        ...

    async def find_by_customer_id(self, customer_id: UUID) -> ShoppingCart | None:
        """Find the cart owned by a customer."""
        ...

    async def list_all(self) -> list[ShoppingCart]:
        ...

    async def add(self, cart: ShoppingCart) -> None:
        """Persist a new cart.

        Raises:
            DuplicateItemError: If the id is stored or the customer already
                has a cart.
        """
        ...

    async def update(self, cart: ShoppingCart) -> None:
        """Persist changes to an existing cart.

        Raises:
            NotFoundError: If the cart does not exist.
        """
        ...
