"""
Centralized configuration module for the Teams webhook client.

Provides:
- Type-safe access to all environment variables
- Configuration validation at startup
"""

import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_HTTP_TIMEOUT = 10.0


class Config:
    """
    Centralized configuration with lazy loading and validation.

    Values are read from the environment on every access so tests and
    long-running processes see updates immediately.

    Usage:
        from teams_webhook.config import config
        url = config.teams_webhook_url
    """

    _instance: Optional["Config"] = None
    _initialized: bool = False

    def __new__(cls) -> "Config":
        """Singleton pattern - only one Config instance per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        """Initialize config (only runs once due to singleton)."""
        if self._initialized:
            return

        self._initialized = True
        logger.debug("Config singleton initialized")

    # =========================================================================
    # TEAMS WEBHOOK
    # =========================================================================

    @property
    def teams_webhook_url(self) -> str:
        """Teams incoming webhook URL (empty string when not configured)."""
        return os.environ.get("TEAMS_WEBHOOK_URL", "").strip()

    @property
    def http_timeout(self) -> float:
        """
        Request timeout in seconds passed to the HTTP transport.

        Raises:
            ValueError: If TEAMS_HTTP_TIMEOUT is not a positive number
        """
        raw = os.environ.get("TEAMS_HTTP_TIMEOUT", "").strip()
        if not raw:
            return DEFAULT_HTTP_TIMEOUT
        try:
            timeout = float(raw)
        except ValueError:
            raise ValueError(f"TEAMS_HTTP_TIMEOUT must be a number, got {raw!r}") from None
        if timeout <= 0:
            raise ValueError("TEAMS_HTTP_TIMEOUT must be greater than 0")
        return timeout

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate_required(self) -> list[str]:
        """
        Validate that all required configuration is present.

        Returns:
            List of missing configuration keys (empty if all present)
        """
        missing = []

        if not self.teams_webhook_url:
            missing.append("TEAMS_WEBHOOK_URL")

        if missing:
            logger.error(f"Missing required configuration: {missing}")

        return missing


# Global singleton instance
config = Config()
