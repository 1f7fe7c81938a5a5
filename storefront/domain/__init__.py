"""Domain layer - Pure business logic.

This layer contains the aggregates, value objects, protocols (ports) and
domain events of the store. It has NO dependencies on any framework or
infrastructure.

Structure:
- entities/: Entity/AggregateRoot bases and the four aggregates
- value_objects/: Immutable values (Money, Email, Address, ProductSku, OrderNumber)
- protocols/: Repository, event bus and logger ports
- events/: Domain events (things that happened in the domain)
- errors/: Exception hierarchy and message constants
"""
