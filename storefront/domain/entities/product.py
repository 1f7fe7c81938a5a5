"""Product aggregate (catalog entry with stock).

A Product owns its ProductVariant children and the stock counter that the
order placement flow reserves against. Products are never destroyed: they
are soft-deleted and can be restored, keeping order history intact.

Architecture:
    - Aggregate root (events: StockReserved)
    - Raises ValidationError / InvalidStateError subclasses on violations
    - All preconditions checked before mutation

Usage:
    from storefront.domain.entities import Product
    from storefront.domain.value_objects import Money, ProductSku

    product = Product.create(
        name="Espresso Cup",
        description="90 ml porcelain cup",
        price=Money(Decimal("12.50"), "USD"),
        category="Kitchen",
        initial_stock=40,
        sku=ProductSku("CUP-ESP-90"),
    )
    product.reserve_stock(2)
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from storefront.domain.entities.base import AggregateRoot, Entity
from storefront.domain.errors.domain_exceptions import (
    CurrencyMismatchError,
    DuplicateItemError,
    InsufficientStockError,
    NotFoundError,
)
from storefront.domain.errors.product_error import ProductError
from storefront.domain.events.product_events import StockReserved
from storefront.domain.validators import (
    require_non_negative_int,
    require_positive_int,
    require_text,
)
from storefront.domain.value_objects.money import Money
from storefront.domain.value_objects.product_sku import ProductSku


def _as_sku(sku: ProductSku | str) -> ProductSku:
    return sku if isinstance(sku, ProductSku) else ProductSku(sku)


@dataclass(eq=False, kw_only=True)
class ProductVariant(Entity):
    """Specific version of a product (e.g. "Red, Large").

    Owned exclusively by its Product and only created through
    Product.add_variant().

    Attributes:
        product_id: Back-reference to the owning product.
        sku: Variant's own SKU.
        attributes: Free-form descriptor ("color=red;size=L").
        stock_quantity: Variant stock (>= 0).
        price_modifier: Amount added to the parent's price.
    """

    product_id: UUID
    sku: ProductSku
    attributes: str
    stock_quantity: int
    price_modifier: Money

    def effective_price(self, base_price: Money) -> Money:
        """Parent price plus this variant's modifier.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        return base_price.add(self.price_modifier)


@dataclass(eq=False, kw_only=True)
class Product(AggregateRoot):
    """Catalog entry with stock and soft-delete lifecycle.

    Business Rules:
        - Name and category are required
        - stock_quantity is never negative; over-reservation is rejected,
          not clamped
        - Variant SKUs are unique within the product

    Attributes:
        id: Unique product identifier.
        name: Display name.
        description: Free text (may be empty).
        price: Current unit price.
        category: Catalog category.
        stock_quantity: Units on hand.
        sku: Product SKU.
        is_deleted: Soft-delete flag (hidden from catalog listings).
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).
    """

    name: str
    description: str
    price: Money
    category: str
    stock_quantity: int
    sku: ProductSku
    is_deleted: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    _variants: list[ProductVariant] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate product fields.

        Raises:
            ValidationError: If name/category are blank or stock is negative.
        """
        super().__post_init__()
        require_text(self.name, ProductError.NAME_REQUIRED, "name")
        require_text(self.category, ProductError.CATEGORY_REQUIRED, "category")
        require_non_negative_int(
            self.stock_quantity, ProductError.NEGATIVE_STOCK, "stock_quantity"
        )

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        price: Money,
        category: str,
        initial_stock: int,
        sku: ProductSku | str,
    ) -> "Product":
        """Create a new catalog product.

        Args:
            name: Display name (trimmed).
            description: Description (trimmed, may be empty).
            price: Unit price.
            category: Category (trimmed).
            initial_stock: Units on hand (>= 0).
            sku: Product SKU.

        Returns:
            New Product with a fresh id.

        Raises:
            ValidationError: If name/category are blank, stock is negative
                or the SKU is malformed.
        """
        return cls(
            id=uuid7(),
            name=require_text(name, ProductError.NAME_REQUIRED, "name"),
            description=(description or "").strip(),
            price=price,
            category=require_text(category, ProductError.CATEGORY_REQUIRED, "category"),
            stock_quantity=require_non_negative_int(
                initial_stock, ProductError.NEGATIVE_STOCK, "initial_stock"
            ),
            sku=_as_sku(sku),
        )

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    @property
    def variants(self) -> tuple[ProductVariant, ...]:
        """Owned variants in insertion order (read-only view)."""
        return tuple(self._variants)

    def is_available(self) -> bool:
        """Visible in the catalog and has stock on hand."""
        return not self.is_deleted and self.stock_quantity > 0

    def has_stock_for(self, quantity: int) -> bool:
        """Check whether ``quantity`` units could be reserved right now."""
        return 0 < quantity <= self.stock_quantity

    # -------------------------------------------------------------------------
    # Catalog Management
    # -------------------------------------------------------------------------

    def update_details(self, name: str, description: str, category: str) -> None:
        """Replace name, description and category.

        Raises:
            ValidationError: If name or category is blank.
        """
        new_name = require_text(name, ProductError.NAME_REQUIRED, "name")
        new_category = require_text(category, ProductError.CATEGORY_REQUIRED, "category")

        self.name = new_name
        self.description = (description or "").strip()
        self.category = new_category
        self._touch()

    def update_price(self, new_price: Money) -> None:
        """Replace the unit price.

        Existing cart and order lines keep their own price snapshots.
        """
        self.price = new_price
        self._touch()

    def soft_delete(self) -> None:
        """Hide the product from the catalog without removing history."""
        self.is_deleted = True
        self._touch()

    def restore(self) -> None:
        """Undo a soft delete."""
        self.is_deleted = False
        self._touch()

    # -------------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------------

    def add_stock(self, quantity: int) -> None:
        """Receive new stock.

        Raises:
            ValidationError: If quantity is not a positive integer.
        """
        require_positive_int(quantity, ProductError.QUANTITY_NOT_POSITIVE)
        self.stock_quantity += quantity
        self._touch()

    def reserve_stock(self, quantity: int) -> None:
        """Reserve stock for an order line.

        Called by the order placement flow before Order.place(), not by
        catalog management.

        Raises:
            ValidationError: If quantity is not a positive integer.
            InsufficientStockError: If quantity exceeds stock on hand. Stock
                is left unchanged.

        Side Effects (on success):
            - Decrements stock_quantity by exactly ``quantity``
            - Raises StockReserved
        """
        require_positive_int(quantity, ProductError.QUANTITY_NOT_POSITIVE)
        if quantity > self.stock_quantity:
            raise InsufficientStockError(
                product_id=self.id,
                product_name=self.name,
                available=self.stock_quantity,
                requested=quantity,
            )

        self.stock_quantity -= quantity
        self._touch()
        self._raise_event(StockReserved(product_id=self.id, quantity=quantity))

    def restore_stock(self, quantity: int) -> None:
        """Give back a reservation (order cancelled or placement aborted).

        Raises:
            ValidationError: If quantity is not a positive integer.
        """
        require_positive_int(quantity, ProductError.QUANTITY_NOT_POSITIVE)
        self.stock_quantity += quantity
        self._touch()

    # -------------------------------------------------------------------------
    # Variants
    # -------------------------------------------------------------------------

    def add_variant(
        self,
        sku: ProductSku | str,
        attributes: str,
        stock_quantity: int,
        price_modifier: Money,
    ) -> ProductVariant:
        """Create a variant owned by this product.

        Args:
            sku: Variant SKU, unique within the product.
            attributes: Free-form descriptor.
            stock_quantity: Variant stock (>= 0).
            price_modifier: Added to the product price; same currency.

        Returns:
            The new ProductVariant.

        Raises:
            ValidationError: If stock is negative or the SKU is malformed.
            DuplicateItemError: If the SKU is already used by the product or
                one of its variants.
            CurrencyMismatchError: If the modifier currency differs from the
                product price currency.
        """
        variant_sku = _as_sku(sku)
        require_non_negative_int(stock_quantity, ProductError.NEGATIVE_STOCK, "stock_quantity")
        if variant_sku == self.sku or any(v.sku == variant_sku for v in self._variants):
            raise DuplicateItemError(ProductError.DUPLICATE_VARIANT_SKU, sku=variant_sku.value)
        if not price_modifier.same_currency_as(self.price):
            raise CurrencyMismatchError(
                self.price.currency.value, price_modifier.currency.value
            )

        variant = ProductVariant(
            id=uuid7(),
            product_id=self.id,
            sku=variant_sku,
            attributes=(attributes or "").strip(),
            stock_quantity=stock_quantity,
            price_modifier=price_modifier,
        )
        self._variants.append(variant)
        self._touch()
        return variant

    def remove_variant(self, variant_id: UUID) -> None:
        """Remove a variant.

        Raises:
            NotFoundError: If the variant does not belong to this product.
        """
        variant = next((v for v in self._variants if v.id == variant_id), None)
        if variant is None:
            raise NotFoundError(ProductError.VARIANT_NOT_FOUND, variant_id=str(variant_id))
        self._variants.remove(variant)
        self._touch()

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
