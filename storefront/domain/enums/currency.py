"""Supported currencies (ISO 4217).

Money amounts always carry one of these codes. Expand as needed for new
markets.
"""

from enum import Enum


class Currency(str, Enum):
    """ISO 4217 currency codes accepted by the store.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are the upper-case ISO codes.
    """

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CHF = "CHF"
    CAD = "CAD"
    AUD = "AUD"
    NZD = "NZD"
    CNY = "CNY"
    INR = "INR"
    SEK = "SEK"
    NOK = "NOK"
    DKK = "DKK"
    PLN = "PLN"
    MXN = "MXN"
    BRL = "BRL"
    ZAR = "ZAR"
    EGP = "EGP"

    @classmethod
    def values(cls) -> list[str]:
        """Get all currency codes as strings.

        Returns:
            list[str]: List of ISO codes.
        """
        return [currency.value for currency in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a supported currency code (case-sensitive).

        Args:
            value: String to check.

        Returns:
            bool: True if value is a supported code.
        """
        return value in cls.values()


# Currency of an empty cart or order total
DEFAULT_CURRENCY = Currency.USD
