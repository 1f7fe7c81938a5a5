"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables (case-insensitive)
- Type validation via Pydantic

Usage:
    from storefront.core.config import get_settings

    settings = get_settings()
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.core.enums import Environment

VALID_LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    app_name: str = Field(
        default="Storefront",
        description="Application name (bound to every log line)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON (CI/production) instead of colored console output",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-cased log level.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        normalized = v.strip().upper()
        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {v!r}"
            )
        return normalized

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running under automated tests (testing or CI)."""
        return self.environment in (Environment.TESTING, Environment.CI)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
