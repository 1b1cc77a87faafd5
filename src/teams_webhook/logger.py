"""
Tracking-ID logging for webhook posts.

Every post is tagged with a ULID so all log lines for one request can be
grouped together. Handlers and levels are left to the host application.
"""

import logging
from typing import Any, MutableMapping


class TrackingLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that prefixes messages with a tracking ID.

    The ID is also attached to each record as `tracking_id` so formatters
    can place it elsewhere.
    """

    def __init__(self, logger: logging.Logger, tracking_id: str):
        super().__init__(logger, {"tracking_id": tracking_id})
        self.tracking_id = tracking_id

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs.setdefault("extra", {}).update(self.extra)
        return f"[{self.tracking_id}] {msg}", kwargs


def get_logger(name: str, tracking_id: str) -> TrackingLoggerAdapter:
    """
    Get a logger that tags every message with a tracking ID.

    Example:
        >>> log = get_logger(__name__, tracking_id)
        >>> log.info("Posting card")
        [01JCK3Q7H8ZVXN3BARC9GWAEZM] Posting card
    """
    return TrackingLoggerAdapter(logging.getLogger(name), tracking_id)
