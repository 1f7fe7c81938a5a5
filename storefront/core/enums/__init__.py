"""Core enums package.

Usage:
    from storefront.core.enums import Environment
"""

from storefront.core.enums.environment import Environment

__all__ = ["Environment"]
