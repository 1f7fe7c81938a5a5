"""Domain entities and aggregate roots."""

from storefront.domain.entities.base import AggregateRoot, Entity
from storefront.domain.entities.customer import Customer
from storefront.domain.entities.order import Order, OrderItem
from storefront.domain.entities.product import Product, ProductVariant
from storefront.domain.entities.shopping_cart import CartItem, ShoppingCart

__all__ = [
    "AggregateRoot",
    "CartItem",
    "Customer",
    "Entity",
    "Order",
    "OrderItem",
    "Product",
    "ProductVariant",
    "ShoppingCart",
]
