"""Order aggregate (order lifecycle state machine).

Architecture:
    - Aggregate root (events: OrderPlaced)
    - State machine with validated transitions (see OrderStatus)
    - total_amount recomputed from lines after every change
    - Lines snapshot product name and unit price; later catalog changes
      never alter historical totals

State Machine:
    PENDING → PROCESSING → SHIPPED → DELIVERED
    PENDING/PROCESSING → CANCELLED

Usage:
    order = Order.create(customer_id, shipping_address)
    order.add_item(product.id, product.name, product.price, 2)
    order.place()
    events = order.pull_domain_events()  # [OrderPlaced(...)]
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from storefront.domain.entities.base import AggregateRoot, Entity
from storefront.domain.enums.currency import DEFAULT_CURRENCY
from storefront.domain.enums.order_status import OrderStatus
from storefront.domain.errors.domain_exceptions import (
    CurrencyMismatchError,
    DuplicateItemError,
    InvalidStateError,
)
from storefront.domain.errors.order_error import OrderError
from storefront.domain.events.order_events import OrderPlaced
from storefront.domain.validators import require_id, require_positive_int, require_text
from storefront.domain.value_objects.address import Address
from storefront.domain.value_objects.money import Money
from storefront.domain.value_objects.order_number import OrderNumber


@dataclass(eq=False, kw_only=True)
class OrderItem(Entity):
    """Line of an order.

    Attributes:
        order_id: Owning order.
        product_id: Product in this line (unique within the order).
        product_name: Name snapshot.
        unit_price: Price snapshot.
        quantity: Units (> 0).
    """

    order_id: UUID
    product_id: UUID
    product_name: str
    unit_price: Money
    quantity: int

    @property
    def line_total(self) -> Money:
        """unit_price × quantity."""
        return self.unit_price.multiply(self.quantity)


@dataclass(eq=False, kw_only=True)
class Order(AggregateRoot):
    """Customer order moving from creation to delivery or cancellation.

    Business Rules:
        - Lines can only be added while PENDING
        - At most one line per product, all lines in one currency
        - An order needs at least one line to be placed
        - Shipped or delivered orders cannot be cancelled

    Attributes:
        id: Unique order identifier.
        customer_id: Customer who owns the order.
        order_number: Human-facing reference.
        shipping_address: Address snapshot.
        status: Current lifecycle state.
        total_amount: Sum of line totals (zero USD when empty).
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).
    """

    customer_id: UUID
    order_number: OrderNumber
    shipping_address: Address
    status: OrderStatus = OrderStatus.PENDING
    total_amount: Money = field(default_factory=lambda: Money.zero(DEFAULT_CURRENCY))
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    _items: list[OrderItem] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        require_id(self.customer_id, OrderError.CUSTOMER_REQUIRED, "customer_id")

    @classmethod
    def create(
        cls,
        customer_id: UUID,
        shipping_address: Address,
        order_number: OrderNumber | None = None,
    ) -> "Order":
        """Create a PENDING order with no lines.

        Args:
            customer_id: Owning customer.
            shipping_address: Address snapshot.
            order_number: Pre-generated number; generated when omitted.

        Raises:
            ValidationError: If customer_id is missing or nil.
        """
        require_id(customer_id, OrderError.CUSTOMER_REQUIRED, "customer_id")
        return cls(
            id=uuid7(),
            customer_id=customer_id,
            order_number=order_number or OrderNumber.generate(),
            shipping_address=shipping_address,
        )

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    @property
    def items(self) -> tuple[OrderItem, ...]:
        """Order lines in insertion order (read-only view)."""
        return tuple(self._items)

    def belongs_to(self, customer_id: UUID) -> bool:
        """Ownership check for the authorization layer."""
        return self.customer_id == customer_id

    def is_cancellable(self) -> bool:
        """True while cancel() would succeed (PENDING or PROCESSING)."""
        return self.status in OrderStatus.cancellable_states()

    # -------------------------------------------------------------------------
    # Lines
    # -------------------------------------------------------------------------

    def add_item(
        self, product_id: UUID, product_name: str, unit_price: Money, quantity: int
    ) -> OrderItem:
        """Append a line and recompute the total.

        Raises:
            InvalidStateError: If the order is not PENDING.
            DuplicateItemError: If the product already has a line.
            CurrencyMismatchError: If unit_price differs in currency from
                the existing lines.
            ValidationError: If quantity is not positive or name is blank.
        """
        if self.status != OrderStatus.PENDING:
            raise InvalidStateError(OrderError.NOT_PENDING, status=self.status.value)
        require_positive_int(quantity, OrderError.QUANTITY_NOT_POSITIVE)
        name = require_text(product_name, OrderError.PRODUCT_NAME_REQUIRED, "product_name")
        if any(item.product_id == product_id for item in self._items):
            raise DuplicateItemError(
                OrderError.DUPLICATE_ITEM, product_id=str(product_id), product_name=name
            )
        if self._items and not unit_price.same_currency_as(self._items[0].unit_price):
            raise CurrencyMismatchError(
                self._items[0].unit_price.currency.value, unit_price.currency.value
            )

        item = OrderItem(
            id=uuid7(),
            order_id=self.id,
            product_id=product_id,
            product_name=name,
            unit_price=unit_price,
            quantity=quantity,
        )
        self._items.append(item)
        self._recalculate_total()
        self._touch()
        return item

    # -------------------------------------------------------------------------
    # State Transitions
    # -------------------------------------------------------------------------

    def place(self) -> None:
        """Transition PENDING → PROCESSING.

        Called after all lines are added and stock has been reserved for
        each of them.

        Raises:
            InvalidStateError: If the order has no lines or is not PENDING.

        Side Effects (on success):
            - Sets status to PROCESSING
            - Raises OrderPlaced
        """
        if not self._items:
            raise InvalidStateError(OrderError.EMPTY_ORDER, order_id=str(self.id))
        self._transition(OrderStatus.PROCESSING, OrderError.NOT_PENDING)
        self._raise_event(
            OrderPlaced(
                order_id=self.id,
                customer_id=self.customer_id,
                order_number=self.order_number.value,
            )
        )

    def mark_as_shipped(self) -> None:
        """Transition PROCESSING → SHIPPED.

        Raises:
            InvalidStateError: If the order is not PROCESSING.
        """
        self._transition(OrderStatus.SHIPPED, OrderError.CANNOT_SHIP)

    def mark_as_delivered(self) -> None:
        """Transition SHIPPED → DELIVERED.

        Raises:
            InvalidStateError: If the order is not SHIPPED.
        """
        self._transition(OrderStatus.DELIVERED, OrderError.CANNOT_DELIVER)

    def cancel(self) -> None:
        """Transition PENDING/PROCESSING → CANCELLED.

        Stock restoration for placed orders is the orchestrating service's
        job (Product.restore_stock).

        Raises:
            InvalidStateError: If SHIPPED, DELIVERED or already CANCELLED.
        """
        self._transition(OrderStatus.CANCELLED, OrderError.CANNOT_CANCEL)

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _transition(self, target: OrderStatus, error: str) -> None:
        if not self.status.can_transition_to(target):
            raise InvalidStateError(
                error, status=self.status.value, target=target.value
            )
        self.status = target
        self._touch()

    def _recalculate_total(self) -> None:
        if not self._items:
            self.total_amount = Money.zero(DEFAULT_CURRENCY)
            return
        total = Money.zero(self._items[0].unit_price.currency)
        for item in self._items:
            total = total.add(item.line_total)
        self.total_amount = total

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
