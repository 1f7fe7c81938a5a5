"""ProductRepository protocol for catalog persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from storefront.domain.entities.product import Product
from storefront.domain.value_objects.money import Money
from storefront.domain.value_objects.product_sku import ProductSku


class ProductRepository(Protocol):
    """Product repository protocol (port).

    Soft-deleted products stay retrievable by id and SKU (order history
    references them) but are hidden from listings and searches unless asked
    for explicitly.
    """

    async def find_by_id(self, product_id: UUID) -> Product | None:
        """Find product by ID.

        Returns:
            Product if found (deleted or not), None otherwise.
        """
        ...

    async def find_by_sku(self, sku: ProductSku | str) -> Product | None:
        """Find product by SKU (case-insensitive)."""
        ...

    async def list_all(self, include_deleted: bool = False) -> list[Product]:
        """List products, excluding soft-deleted ones by default."""
        ...

    async def search(
        self,
        name_filter: str | None = None,
        category: str | None = None,
        min_price: Money | None = None,
        max_price: Money | None = None,
    ) -> list[Product]:
        """Search non-deleted products.

        All filters are optional and combined with AND.

        Args:
            name_filter: Case-insensitive substring of the product name.
            category: Exact category (case-insensitive).
            min_price: Inclusive lower price bound.
            max_price: Inclusive upper price bound.

        Returns:
            Matching products. Products priced in a different currency than
            a given bound never match that bound.
        """
        ...

    async def add(self, product: Product) -> None:
        """Persist a new product.

        Raises:
            DuplicateItemError: If the id or SKU is already stored.
        """
        ...

    async def update(self, product: Product) -> None:
        """Persist changes to an existing product.

        Raises:
            NotFoundError: If the product does not exist.
        """
        ...
