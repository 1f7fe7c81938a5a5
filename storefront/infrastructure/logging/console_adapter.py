"""Structured console logging for the storefront core.

Writes one structlog line per event to stdout. The container builds a single
adapter from Settings and binds ``app`` and ``environment`` to it; handlers
then bind the ids they work on and log snake_case event names:

    log = logger.bind(customer_id=str(customer_id))
    log.info("order_placed", order_number="ORD-20260115-4821", total="33.50 USD")
    log.warning("place_order_rejected", reason="Cart not found")
    log.error("place_order_persist_failed", error=exc, order_id=str(order_id))

Rendering:
- Development: coloured console renderer
- Testing/CI/production (or LOG_JSON=true): JSON, one object per line

Matches LoggerProtocol structurally (PEP 544); it does not inherit from it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _error_context(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    if error is None:
        return context
    return {**context, "error_type": type(error).__name__, "error_message": str(error)}


class ConsoleAdapter:
    """LoggerProtocol implementation used by handlers and the event bus.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelName(level.upper())
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure, e.g. a repository write that raised.

        Args:
            message (str): Event name.
            error (Exception | None): Exception whose type and text are added
                as ``error_type`` and ``error_message``.
            **context: Structured key-value context.
        """
        self._logger.error(message, **_error_context(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_error_context(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        Returns:
            ConsoleAdapter: New adapter instance; this one is unchanged.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for bind()."""
        return self.bind(**context)
