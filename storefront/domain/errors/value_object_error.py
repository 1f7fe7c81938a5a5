"""Value object validation messages."""


class ValueObjectError:
    """Value object error constants.

    Used as messages of ValidationError raised from value object
    constructors.
    """

    NEGATIVE_AMOUNT = "Money amount cannot be negative"
    INVALID_AMOUNT = "Money amount must be a finite number"
    INVALID_CURRENCY = "Unsupported currency code"
    NEGATIVE_MULTIPLIER = "Multiplier must be a non-negative integer"

    EMPTY_EMAIL = "Email cannot be empty"
    INVALID_EMAIL = "Email address is not valid"

    EMPTY_SKU = "Product SKU cannot be empty"
    INVALID_SKU = (
        "Product SKU must be 4-20 characters of letters, digits and hyphens, "
        "starting and ending with a letter or digit"
    )

    EMPTY_ORDER_NUMBER = "Order number cannot be empty"

    STREET_REQUIRED = "Street is required"
    CITY_REQUIRED = "City is required"
    COUNTRY_REQUIRED = "Country is required"
    POSTAL_CODE_REQUIRED = "Postal code is required"
