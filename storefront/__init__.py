"""Storefront - transactional domain core of an online store.

Layers:
- core/: configuration, Result type, composition root
- domain/: aggregates, value objects, events, protocols (pure Python)
- application/: command handlers orchestrating several aggregates
- infrastructure/: adapters (structlog logging, in-memory event bus, repositories)
"""

__version__ = "0.1.0"
