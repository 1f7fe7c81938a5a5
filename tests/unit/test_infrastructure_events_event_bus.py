"""Unit tests for InMemoryEventBus.

Tests cover:
- Subscribe/publish basic flow
- Multiple handlers for same event
- Exact type routing
- Handler failure doesn't break others (fail-open)
- No handlers registered (no-op)
- Error logging for handler failures

Architecture:
- Unit tests with mocked logger
"""

from unittest.mock import MagicMock

import pytest
from uuid_extensions import uuid7

from storefront.domain.events import DomainEvent, OrderPlaced, StockReserved
from storefront.infrastructure.events.in_memory_event_bus import InMemoryEventBus


def create_order_placed() -> OrderPlaced:
    return OrderPlaced(
        order_id=uuid7(), customer_id=uuid7(), order_number="ORD-20260101-1234"
    )


@pytest.mark.unit
class TestInMemoryEventBusBasicFlow:
    async def test_subscribe_and_publish_single_handler(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event = create_order_placed()
        event_bus.subscribe(OrderPlaced, handler)
        await event_bus.publish(event)

        assert received == [event]

    async def test_multiple_handlers_all_execute(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        calls: list[str] = []

        async def handler_1(event: DomainEvent) -> None:
            calls.append("handler_1")

        async def handler_2(event: DomainEvent) -> None:
            calls.append("handler_2")

        event_bus.subscribe(OrderPlaced, handler_1)
        event_bus.subscribe(OrderPlaced, handler_2)
        await event_bus.publish(create_order_placed())

        assert sorted(calls) == ["handler_1", "handler_2"]
        assert event_bus.handler_count(OrderPlaced) == 2

    async def test_handlers_only_receive_their_event_type(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def on_stock(event: DomainEvent) -> None:
            received.append(event)

        event_bus.subscribe(StockReserved, on_stock)
        await event_bus.publish(create_order_placed())

        assert received == []

    async def test_publish_with_no_handlers_is_noop(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        await event_bus.publish(create_order_placed())

        mock_logger.debug.assert_not_called()
        mock_logger.warning.assert_not_called()


@pytest.mark.unit
class TestInMemoryEventBusFailOpen:
    async def test_failing_handler_does_not_stop_others(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        calls: list[str] = []

        async def failing_handler(event: DomainEvent) -> None:
            raise RuntimeError("mail server down")

        async def working_handler(event: DomainEvent) -> None:
            calls.append("working")

        event_bus.subscribe(OrderPlaced, failing_handler)
        event_bus.subscribe(OrderPlaced, working_handler)
        event = create_order_placed()

        await event_bus.publish(event)

        assert calls == ["working"]
        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args == ("event_handler_failed",)
        assert kwargs["event_type"] == "OrderPlaced"
        assert kwargs["event_id"] == str(event.event_id)
        assert kwargs["handler_name"] == "failing_handler"
        assert kwargs["error_type"] == "RuntimeError"
        assert kwargs["error_message"] == "mail server down"

    async def test_publishing_is_logged_at_debug(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        async def handler(event: DomainEvent) -> None:
            return None

        event_bus.subscribe(StockReserved, handler)
        await event_bus.publish(StockReserved(product_id=uuid7(), quantity=2))

        mock_logger.debug.assert_called_once()
        assert mock_logger.debug.call_args.kwargs["handler_count"] == 1
