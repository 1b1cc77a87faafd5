"""
Unit tests for logging and ID utilities.
"""

import logging
import re

from teams_webhook.logger import TrackingLoggerAdapter, get_logger
from teams_webhook.ulid_generator import generate_ulid


# =============================================================================
# ULID TESTS
# =============================================================================


class TestULIDGenerator:
    """Test ULID generation."""

    def test_ulid_format(self):
        """Test ULID is 26 Crockford base32 characters."""
        ulid = generate_ulid()

        assert len(ulid) == 26
        assert re.fullmatch(r"[0-9A-HJKMNP-TV-Z]{26}", ulid)

    def test_ulid_unique(self):
        """Test generated ULIDs are unique."""
        ulids = {generate_ulid() for _ in range(100)}

        assert len(ulids) == 100


# =============================================================================
# LOGGER TESTS
# =============================================================================


class TestTrackingLogger:
    """Test tracking ID logging."""

    def test_get_logger_returns_adapter(self):
        """Test get_logger wraps the named logger."""
        log = get_logger("teams_webhook.test", "ABC123")

        assert isinstance(log, TrackingLoggerAdapter)
        assert log.tracking_id == "ABC123"
        assert log.logger.name == "teams_webhook.test"

    def test_messages_prefixed_with_tracking_id(self, caplog):
        """Test every level includes the tracking ID prefix and record attribute."""
        log = get_logger("teams_webhook.test", "ABC123")

        with caplog.at_level(logging.DEBUG, logger="teams_webhook.test"):
            log.debug("debug message")
            log.info("info message")
            log.warning("warning message")
            log.error("error message")

        messages = [record.getMessage() for record in caplog.records]
        assert messages == [
            "[ABC123] debug message",
            "[ABC123] info message",
            "[ABC123] warning message",
            "[ABC123] error message",
        ]
        assert all(record.tracking_id == "ABC123" for record in caplog.records)

    def test_get_logger_does_not_configure_logging(self, monkeypatch):
        """Test get_logger adds no handlers and leaves the level unset."""
        target = logging.getLogger("teams_webhook.unconfigured")
        monkeypatch.setattr(logging.getLogger(), "handlers", [])

        get_logger("teams_webhook.unconfigured", "ABC123").info("hello")

        assert target.handlers == []
        assert target.level == logging.NOTSET
