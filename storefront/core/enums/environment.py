"""Runtime environments of the storefront core.

Settings reads the environment from ``ENVIRONMENT`` and the container uses it
to pick how log lines are rendered.

Environments:
- DEVELOPMENT: coloured console logs for a developer running handlers locally
- TESTING: pytest runs; in-memory adapters, JSON logs
- CI: pipeline runs of the test suite, JSON logs
- PRODUCTION: JSON logs shipped to the log collector
"""

from enum import Enum


class Environment(str, Enum):
    """Where the storefront core is running."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def renders_json_logs(self) -> bool:
        """Only local development gets the human-readable console renderer."""
        return self is not Environment.DEVELOPMENT
