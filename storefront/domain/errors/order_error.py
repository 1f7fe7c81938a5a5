"""Order domain errors.

Defines message constants for order validation and lifecycle failures.
"""


class OrderError:
    """Order error constants.

    Error Categories:
        - Validation errors: CUSTOMER_REQUIRED, PRODUCT_NAME_REQUIRED,
          QUANTITY_NOT_POSITIVE
        - Content errors: DUPLICATE_ITEM, EMPTY_ORDER
        - Lifecycle errors: NOT_PENDING, CANNOT_SHIP, CANNOT_DELIVER,
          CANNOT_CANCEL
    """

    CUSTOMER_REQUIRED = "Customer ID is required"
    PRODUCT_NAME_REQUIRED = "Product name is required"
    QUANTITY_NOT_POSITIVE = "Quantity must be a positive integer"

    DUPLICATE_ITEM = "Product is already in this order"
    EMPTY_ORDER = "Cannot place an order without items"

    NOT_PENDING = "Order is not pending"
    """Order left the PENDING state.

    Used when:
    - add_item() is called after placement
    - place() is called twice or after cancellation
    """

    CANNOT_SHIP = "Only processing orders can be shipped"
    CANNOT_DELIVER = "Order must be shipped before it can be delivered"
    CANNOT_CANCEL = "Only pending or processing orders can be cancelled"
