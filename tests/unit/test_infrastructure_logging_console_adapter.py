"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding
- Renderer and level selection

Architecture:
- Unit tests with mocked structlog
- NO real logging output
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from storefront.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "storefront.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_forward_message_and_context(self, level):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("order_placed", order_id="123", lines=2)

            getattr(mock_logger, level).assert_called_once_with(
                "order_placed", order_id="123", lines=2
            )

    def test_error_adds_exception_details(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("persist_failed", error=RuntimeError("disk full"), order_id="1")

            mock_logger.error.assert_called_once_with(
                "persist_failed",
                order_id="1",
                error_type="RuntimeError",
                error_message="disk full",
            )

    def test_error_without_exception(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().error("failed", code="E1")

            mock_logger.error.assert_called_once_with("failed", code="E1")

    def test_critical_adds_exception_details(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().critical("boom", error=ValueError("bad"))

            mock_logger.critical.assert_called_once_with(
                "boom", error_type="ValueError", error_message="bad"
            )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    def test_bind_returns_new_adapter_with_bound_logger(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(customer_id="c-1")
            bound.info("cart_loaded")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(customer_id="c-1")
            bound_logger.info.assert_called_once_with("cart_loaded")
            mock_logger.info.assert_not_called()

    def test_with_context_is_bind_alias(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(request_id="r-1")

            mock_logger.bind.assert_called_once_with(request_id="r-1")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    def test_json_renderer_when_requested(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once_with()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
            mock_structlog.processors.JSONRenderer.assert_not_called()

    def test_level_filtering_uses_configured_level(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level="warning")

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(
                logging.WARNING
            )
