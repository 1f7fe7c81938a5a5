"""Customer aggregate.

Holds identity and profile data for a shopper. Password hashing and email
uniqueness are infrastructure concerns: the aggregate stores an opaque
hash and the repository guarantees one customer per email.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from uuid_extensions import uuid7

from storefront.domain.entities.base import AggregateRoot
from storefront.domain.errors.customer_error import CustomerError
from storefront.domain.validators import require_text
from storefront.domain.value_objects.address import Address
from storefront.domain.value_objects.email import Email


def _as_email(email: Email | str) -> Email:
    return email if isinstance(email, Email) else Email(email)


@dataclass(eq=False, kw_only=True)
class Customer(AggregateRoot):
    """Registered customer.

    Attributes:
        id: Unique customer identifier.
        first_name: Given name.
        last_name: Family name.
        email: Login and contact address.
        password_hash: Opaque hash produced by the identity layer.
        shipping_address: Default shipping address, if any.
        is_admin: Administrative privileges (one-way promotion).
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).
    """

    first_name: str
    last_name: str
    email: Email
    password_hash: str
    shipping_address: Address | None = None
    is_admin: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        super().__post_init__()
        require_text(self.first_name, CustomerError.FIRST_NAME_REQUIRED, "first_name")
        require_text(self.last_name, CustomerError.LAST_NAME_REQUIRED, "last_name")

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        email: Email | str,
        password_hash: str,
    ) -> "Customer":
        """Register a new customer.

        Raises:
            ValidationError: If a name is blank or the email is invalid.
        """
        return cls(
            id=uuid7(),
            first_name=require_text(
                first_name, CustomerError.FIRST_NAME_REQUIRED, "first_name"
            ),
            last_name=require_text(last_name, CustomerError.LAST_NAME_REQUIRED, "last_name"),
            email=_as_email(email),
            password_hash=password_hash,
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def update_profile(
        self,
        first_name: str,
        last_name: str,
        shipping_address: Address | None = None,
    ) -> None:
        """Replace names and default shipping address.

        Raises:
            ValidationError: If a name is blank.
        """
        new_first = require_text(first_name, CustomerError.FIRST_NAME_REQUIRED, "first_name")
        new_last = require_text(last_name, CustomerError.LAST_NAME_REQUIRED, "last_name")

        self.first_name = new_first
        self.last_name = new_last
        self.shipping_address = shipping_address
        self._touch()

    def change_password(self, password_hash: str) -> None:
        self.password_hash = password_hash
        self._touch()

    def change_email(self, email: Email | str) -> None:
        """Replace the email address.

        Raises:
            ValidationError: If the address is invalid.
        """
        self.email = _as_email(email)
        self._touch()

    def promote_to_admin(self) -> None:
        self.is_admin = True
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
