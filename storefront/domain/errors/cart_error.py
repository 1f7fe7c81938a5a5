"""Shopping cart domain errors."""


class CartError:
    """Shopping cart error constants."""

    CUSTOMER_REQUIRED = "Customer ID is required"
    PRODUCT_NAME_REQUIRED = "Product name is required"
    QUANTITY_NOT_POSITIVE = "Quantity must be a positive integer"
    QUANTITY_NOT_INTEGER = "Quantity must be an integer"
    ITEM_NOT_FOUND = "Product is not in the cart"
