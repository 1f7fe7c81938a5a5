"""Result types returned by the storefront command handlers.

Aggregates raise domain exceptions; PlaceOrderHandler and CancelOrderHandler
catch them at the application boundary and answer with ``Success(order)`` or
``Failure(error)``, where ``error`` is one of the handler's message constants
(``PlaceOrderError.CART_EMPTY``, ``OrderError.CANNOT_CANCEL``, ...). Callers
such as an HTTP layer or a job map failures to their own responses.

Usage:
    result = await get_place_order_handler().handle(
        PlaceOrder(customer_id=customer.id, shipping_address=address)
    )
    match result:
        case Success(value=order):
            print(order.order_number, order.total_amount)
        case Failure(error=PlaceOrderError.CART_EMPTY):
            print("Nothing to check out")
        case Failure(error=error):
            print(f"Checkout failed: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Command handled; ``value`` is the resulting aggregate (e.g. the Order).

    Attributes:
        value: Aggregate produced or changed by the command.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Command rejected or not persisted; nothing was published.

    Attributes:
        error: Message constant (or database error text) describing why.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
