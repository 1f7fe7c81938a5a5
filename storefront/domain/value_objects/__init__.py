"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from storefront.domain.value_objects.address import Address
from storefront.domain.value_objects.email import Email
from storefront.domain.value_objects.money import Money, validate_currency
from storefront.domain.value_objects.order_number import OrderNumber
from storefront.domain.value_objects.product_sku import ProductSku

__all__ = [
    "Address",
    "Email",
    "Money",
    "OrderNumber",
    "ProductSku",
    "validate_currency",
]
