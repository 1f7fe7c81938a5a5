"""Customer domain errors."""


class CustomerError:
    """Customer error constants."""

    FIRST_NAME_REQUIRED = "First name is required"
    LAST_NAME_REQUIRED = "Last name is required"
