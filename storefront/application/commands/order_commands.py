"""Order commands (CQRS write operations).

Commands represent user intent to change order state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass
from uuid import UUID

from storefront.domain.value_objects.address import Address


@dataclass(frozen=True, kw_only=True)
class PlaceOrder:
    """Turn a customer's cart into a placed order.

    Reserves stock for every cart line, creates the order, places it and
    empties the cart.

    State Transition: Order PENDING → PROCESSING

    Attributes:
        customer_id: Customer placing the order.
        shipping_address: Address snapshot for the order.
        cart_id: Specific cart to check out. When omitted the customer's
            own cart is used.

    Example:
        >>> command = PlaceOrder(
        ...     customer_id=customer.id,
        ...     shipping_address=Address("1 Main St", "Springfield", "US", "12345"),
        ... )
        >>> result = await handler.handle(command)
    """

    customer_id: UUID
    shipping_address: Address
    cart_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class CancelOrder:
    """Cancel a customer's order and give reserved stock back.

    State Transition: PENDING/PROCESSING → CANCELLED

    Attributes:
        order_id: Order to cancel.
        customer_id: Customer requesting the cancellation (must own it).
    """

    order_id: UUID
    customer_id: UUID
