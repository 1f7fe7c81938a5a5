"""Order number value object.

Human-facing order reference: ``ORD-<UTC yyyyMMdd>-<4 digits>``.

Generation takes an optional clock and random source so tests can pin the
result:

    >>> import random
    >>> from datetime import UTC, datetime
    >>> OrderNumber.generate(
    ...     clock=lambda: datetime(2026, 1, 15, tzinfo=UTC),
    ...     rng=random.Random(7),
    ... ).value
    'ORD-20260115-...'
"""

import random
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Self

from storefront.domain.errors.domain_exceptions import ValidationError
from storefront.domain.errors.value_object_error import ValueObjectError

ORDER_NUMBER_PREFIX = "ORD"


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class OrderNumber:
    """Immutable order reference, compared by value.

    Attributes:
        value: The order number string.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(ValueObjectError.EMPTY_ORDER_NUMBER)

    @classmethod
    def generate(
        cls,
        clock: Callable[[], datetime] | None = None,
        rng: random.Random | None = None,
    ) -> Self:
        """Generate a new order number.

        Args:
            clock: Returns the current time; converted to UTC. Defaults to
                the system clock.
            rng: Random source for the 4-digit suffix. Defaults to the
                module-level generator.

        Returns:
            OrderNumber such as ``ORD-20260115-4821``.
        """
        now = (clock or _utc_now)()
        if now.tzinfo is not None:
            now = now.astimezone(UTC)
        suffix = (rng or random).randint(1000, 9999)
        return cls(f"{ORDER_NUMBER_PREFIX}-{now:%Y%m%d}-{suffix}")

    @classmethod
    def from_storage(cls, value: str) -> Self:
        """Rebuild an order number read back from persistence.

        The stored value is trusted (no format check) but must not be empty.

        Raises:
            ValidationError: If value is empty or blank.
        """
        return cls(value)

    def __str__(self) -> str:
        return self.value
