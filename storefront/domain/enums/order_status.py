"""Order lifecycle states.

State Machine:
    PENDING → PROCESSING → SHIPPED → DELIVERED
    PENDING → CANCELLED
    PROCESSING → CANCELLED

    - PENDING: Order created, items may still be added
    - PROCESSING: Order placed, stock reserved, awaiting shipment
    - SHIPPED: Handed to the carrier
    - DELIVERED: Received by the customer (terminal)
    - CANCELLED: Cancelled before shipment (terminal)

Usage:
    from storefront.domain.enums import OrderStatus

    if order.status.can_transition_to(OrderStatus.CANCELLED):
        order.cancel()
"""

from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle states.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are lowercase for consistency.
    """

    PENDING = "pending"
    """Order created, still editable.

    Items can only be added in this state.
    """

    PROCESSING = "processing"
    """Order placed.

    Stock has been reserved by the placement flow; awaiting shipment.
    """

    SHIPPED = "shipped"
    """Order shipped. Can no longer be cancelled."""

    DELIVERED = "delivered"
    """Order delivered. Terminal."""

    CANCELLED = "cancelled"
    """Order cancelled. Terminal."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings.

        Returns:
            list[str]: List of status values.
        """
        return [status.value for status in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid status.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid status.
        """
        return value in cls.values()

    @classmethod
    def cancellable_states(cls) -> list["OrderStatus"]:
        """Get states from which an order may be cancelled.

        Returns:
            list[OrderStatus]: PENDING and PROCESSING.
        """
        return [cls.PENDING, cls.PROCESSING]

    @classmethod
    def terminal_states(cls) -> list["OrderStatus"]:
        """Get terminal states (no further transitions).

        Returns:
            list[OrderStatus]: DELIVERED and CANCELLED.
        """
        return [cls.DELIVERED, cls.CANCELLED]

    def can_transition_to(self, target: "OrderStatus") -> bool:
        """Check whether the state machine allows moving to ``target``.

        Args:
            target: Desired next status.

        Returns:
            bool: True if the transition is legal.

        Example:
            >>> OrderStatus.PENDING.can_transition_to(OrderStatus.PROCESSING)
            True
            >>> OrderStatus.SHIPPED.can_transition_to(OrderStatus.CANCELLED)
            False
        """
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}
