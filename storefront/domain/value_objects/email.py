"""Email value object with validation.

Immutable value object that validates email format.
"""

import re
from dataclasses import dataclass

from storefront.domain.errors.domain_exceptions import ValidationError
from storefront.domain.errors.value_object_error import ValueObjectError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Attributes:
        value: The email address string (validated, trimmed, lowercase).

    Raises:
        ValidationError: If email is empty or its format is invalid.

    Example:
        >>> email = Email("  User@Example.COM ")
        >>> str(email)
        'user@example.com'
        >>> Email("invalid")
        Traceback (most recent call last):
        ...
        ValidationError: Email address is not valid
    """

    value: str

    def __post_init__(self) -> None:
        """Validate email format after initialization.

        Raises:
            ValidationError: If email is empty or malformed.
        """
        if not self.value or not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(ValueObjectError.EMPTY_EMAIL)

        normalized = self.value.strip().lower()
        if not EMAIL_PATTERN.match(normalized):
            raise ValidationError(ValueObjectError.INVALID_EMAIL, email=self.value)

        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
