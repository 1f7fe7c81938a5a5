"""Product SKU value object.

SKUs are normalized to upper case before validation so "tsh-red-l" and
"TSH-RED-L" identify the same catalog entry.
"""

import re
from dataclasses import dataclass

from storefront.domain.errors.domain_exceptions import ValidationError
from storefront.domain.errors.value_object_error import ValueObjectError

# 4-20 chars, letters/digits/hyphens, first and last alphanumeric
SKU_PATTERN = re.compile(r"^[A-Z0-9][A-Z0-9-]{2,18}[A-Z0-9]$")


@dataclass(frozen=True)
class ProductSku:
    """Stock keeping unit identifier.

    Attributes:
        value: Normalized (trimmed, upper-case) SKU.

    Example:
        >>> str(ProductSku(" tsh-red-l "))
        'TSH-RED-L'
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(ValueObjectError.EMPTY_SKU)

        normalized = self.value.strip().upper()
        if not SKU_PATTERN.match(normalized):
            raise ValidationError(ValueObjectError.INVALID_SKU, sku=self.value)

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
