"""ShoppingCart aggregate (mutable pre-order basket).

Cart lines snapshot the product name and unit price at the time they are
added. Totals are computed on read; the cart raises no domain events.

Business Rules:
    - At most one line per product; adding the same product again
      increases its quantity
    - Setting a line quantity to zero or less removes the line
    - All lines share one currency
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from storefront.domain.entities.base import AggregateRoot, Entity
from storefront.domain.enums.currency import DEFAULT_CURRENCY
from storefront.domain.errors.cart_error import CartError
from storefront.domain.errors.domain_exceptions import (
    CurrencyMismatchError,
    NotFoundError,
    ValidationError,
)
from storefront.domain.validators import require_id, require_positive_int, require_text
from storefront.domain.value_objects.money import Money


@dataclass(eq=False, kw_only=True)
class CartItem(Entity):
    """Line of a shopping cart.

    Attributes:
        cart_id: Owning cart.
        product_id: Product in this line (unique within the cart).
        product_name: Name snapshot taken when the line was added.
        unit_price: Price snapshot taken when the line was added.
        quantity: Units (> 0).
    """

    cart_id: UUID
    product_id: UUID
    product_name: str
    unit_price: Money
    quantity: int

    @property
    def line_total(self) -> Money:
        """unit_price × quantity."""
        return self.unit_price.multiply(self.quantity)


@dataclass(eq=False, kw_only=True)
class ShoppingCart(AggregateRoot):
    """A customer's basket before an order is placed.

    Attributes:
        id: Unique cart identifier.
        customer_id: Owning customer.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).

    Example:
        >>> cart = ShoppingCart.create(customer_id)
        >>> cart.add_item(mug_id, "Mug", Money(Decimal("10"), "USD"), 2)
        >>> str(cart.total)
        '20.00 USD'
    """

    customer_id: UUID
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    _items: list[CartItem] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        require_id(self.customer_id, CartError.CUSTOMER_REQUIRED, "customer_id")

    @classmethod
    def create(cls, customer_id: UUID) -> "ShoppingCart":
        """Create an empty cart for a customer.

        Raises:
            ValidationError: If customer_id is missing or nil.
        """
        return cls(id=uuid7(), customer_id=customer_id)

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    @property
    def items(self) -> tuple[CartItem, ...]:
        """Cart lines in insertion order (read-only view)."""
        return tuple(self._items)

    @property
    def total(self) -> Money:
        """Sum of line totals; zero in the default currency when empty."""
        if not self._items:
            return Money.zero(DEFAULT_CURRENCY)
        total = Money.zero(self._items[0].unit_price.currency)
        for item in self._items:
            total = total.add(item.line_total)
        return total

    @property
    def item_count(self) -> int:
        """Total units across all lines."""
        return sum(item.quantity for item in self._items)

    def is_empty(self) -> bool:
        return not self._items

    def get_item(self, product_id: UUID) -> CartItem | None:
        """Line for ``product_id`` or None."""
        return next((i for i in self._items if i.product_id == product_id), None)

    def belongs_to(self, customer_id: UUID) -> bool:
        """Ownership check for the authorization layer."""
        return self.customer_id == customer_id

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def add_item(
        self, product_id: UUID, product_name: str, unit_price: Money, quantity: int
    ) -> None:
        """Add units of a product.

        If the product is already in the cart its quantity is increased by
        ``quantity`` (the original price snapshot is kept); otherwise a new
        line is appended.

        Raises:
            ValidationError: If quantity is not positive or the name is blank.
            CurrencyMismatchError: If unit_price is not in the cart currency.
        """
        require_positive_int(quantity, CartError.QUANTITY_NOT_POSITIVE)
        name = require_text(product_name, CartError.PRODUCT_NAME_REQUIRED, "product_name")
        if self._items and not unit_price.same_currency_as(self._items[0].unit_price):
            raise CurrencyMismatchError(
                self._items[0].unit_price.currency.value, unit_price.currency.value
            )

        existing = self.get_item(product_id)
        if existing is not None:
            existing.quantity += quantity
        else:
            self._items.append(
                CartItem(
                    id=uuid7(),
                    cart_id=self.id,
                    product_id=product_id,
                    product_name=name,
                    unit_price=unit_price,
                    quantity=quantity,
                )
            )
        self._touch()

    def update_item_quantity(self, product_id: UUID, new_quantity: int) -> None:
        """Set the quantity of a line; zero or less removes it.

        Raises:
            NotFoundError: If the product is not in the cart.
        """
        if isinstance(new_quantity, bool) or not isinstance(new_quantity, int):
            raise ValidationError(CartError.QUANTITY_NOT_INTEGER, value=new_quantity)
        item = self._require_item(product_id)
        if new_quantity <= 0:
            self._items.remove(item)
        else:
            item.quantity = new_quantity
        self._touch()

    def remove_item(self, product_id: UUID) -> None:
        """Remove a line.

        Raises:
            NotFoundError: If the product is not in the cart.
        """
        self._items.remove(self._require_item(product_id))
        self._touch()

    def clear(self) -> None:
        """Remove every line."""
        self._items.clear()
        self._touch()

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _require_item(self, product_id: UUID) -> CartItem:
        item = self.get_item(product_id)
        if item is None:
            raise NotFoundError(CartError.ITEM_NOT_FOUND, product_id=str(product_id))
        return item

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
