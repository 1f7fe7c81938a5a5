"""Persistence adapters implementing the domain repository protocols."""

from storefront.infrastructure.persistence.in_memory_repositories import (
    InMemoryCartRepository,
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)

__all__ = [
    "InMemoryCartRepository",
    "InMemoryCustomerRepository",
    "InMemoryOrderRepository",
    "InMemoryProductRepository",
]
