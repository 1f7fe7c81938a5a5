"""Product domain errors.

Defines message constants for catalog validation and stock failures.

Usage:
    from storefront.domain.errors import ProductError, ValidationError

    if quantity <= 0:
        raise ValidationError(ProductError.QUANTITY_NOT_POSITIVE, quantity=quantity)
"""


class ProductError:
    """Product error constants.

    Error Categories:
        - Validation errors: NAME_REQUIRED, CATEGORY_REQUIRED, NEGATIVE_STOCK,
          QUANTITY_NOT_POSITIVE
        - Variant errors: DUPLICATE_VARIANT_SKU, VARIANT_NOT_FOUND
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    NAME_REQUIRED = "Product name is required"
    CATEGORY_REQUIRED = "Category is required"

    NEGATIVE_STOCK = "Stock quantity cannot be negative"
    """Initial or variant stock is below zero.

    Used when:
    - Product.create() receives a negative initial stock
    - add_variant() receives a negative variant stock
    """

    QUANTITY_NOT_POSITIVE = "Quantity must be a positive integer"
    """Stock movement quantity is zero, negative or not an integer.

    Used by add_stock(), reserve_stock() and restore_stock().
    """

    # -------------------------------------------------------------------------
    # Variant Errors
    # -------------------------------------------------------------------------

    DUPLICATE_VARIANT_SKU = "SKU is already used by this product"
    VARIANT_NOT_FOUND = "Variant not found on this product"
