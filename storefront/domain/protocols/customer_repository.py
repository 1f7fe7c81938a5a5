"""CustomerRepository protocol for customer persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from storefront.domain.entities.customer import Customer
from storefront.domain.value_objects.email import Email


class CustomerRepository(Protocol):
    """Customer repository protocol (port).

    The repository guarantees email uniqueness across customers.
    """

    async def find_by_id(self, customer_id: UUID) -> Customer | None:
        """Find customer by ID."""
        ...

    async def find_by_email(self, email: Email | str) -> Customer | None:
        """Find customer by email address.

        Email comparison is case-insensitive.
        """
        ...

    async def exists_by_email(self, email: Email | str) -> bool:
        """Check whether a customer with this email exists."""
        ...

    async def list_all(self) -> list[Customer]:
        ...

    async def add(self, customer: Customer) -> None:
        """Persist a new customer.

        Raises:
            DuplicateItemError: If the id or email is already stored.
        """
        ...

    async def update(self, customer: Customer) -> None:
        """Persist changes to an existing customer.

        Raises:
            NotFoundError: If the customer does not exist.
            DuplicateItemError: If the new email belongs to another customer.
        """
        ...
