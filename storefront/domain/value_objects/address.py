"""Postal address value object.

Snapshotted onto orders at creation time so later profile edits never
rewrite where an order was shipped.
"""

from dataclasses import dataclass

from storefront.domain.errors.domain_exceptions import ValidationError
from storefront.domain.errors.value_object_error import ValueObjectError


@dataclass(frozen=True)
class Address:
    """Immutable shipping address, compared by value.

    Attributes:
        street: Street and number.
        city: City name.
        country: Country name or code.
        postal_code: Postal / ZIP code.

    Raises:
        ValidationError: If any component is blank.
    """

    street: str
    city: str
    country: str
    postal_code: str

    def __post_init__(self) -> None:
        required = (
            ("street", ValueObjectError.STREET_REQUIRED),
            ("city", ValueObjectError.CITY_REQUIRED),
            ("country", ValueObjectError.COUNTRY_REQUIRED),
            ("postal_code", ValueObjectError.POSTAL_CODE_REQUIRED),
        )
        for name, message in required:
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(message, field=name)
            object.__setattr__(self, name, value.strip())

    def __str__(self) -> str:
        return f"{self.street}, {self.city}, {self.country}, {self.postal_code}"
