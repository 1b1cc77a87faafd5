"""
Teams incoming webhook client.

Posts Adaptive Cards to a Teams webhook URL and maps HTTP status codes
to the exception taxonomy in teams_webhook.exceptions:
- 2xx: success, post_message returns True
- 401/403: UnauthorizedError
- 404/405: NotFoundError
- 422: WebhookValidationError with the decoded response body
- anything else, or no response at all: FailedActionError
"""

import json
import logging
from typing import Any, Optional

import requests

from teams_webhook.config import DEFAULT_HTTP_TIMEOUT, config
from teams_webhook.exceptions import FailedActionError, NotFoundError, UnauthorizedError, WebhookValidationError
from teams_webhook.logger import get_logger
from teams_webhook.models import Card
from teams_webhook.ulid_generator import generate_ulid

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json; charset=utf-8"}


class TeamsClient:
    """
    Client for a single Teams incoming webhook.

    The transport is any object with a requests-style
    `request(method, url, **kwargs)` returning a response that exposes
    `status_code` and `text`. By default the client creates and owns a
    requests.Session; an injected transport is borrowed and never closed
    by the client.

    Usage:
        with TeamsClient(webhook_url) as teams:
            teams.post_message(Card().add_element(TextBlock("Hello")))
    """

    def __init__(self, webhook_url: str, transport: Optional[Any] = None, timeout: Optional[float] = None):
        """
        Initialize webhook client.

        Args:
            webhook_url: Teams incoming webhook URL (may be empty)
            transport: Optional HTTP transport to use instead of an owned session
            timeout: Request timeout in seconds passed to the transport
        """
        self.webhook_url = (webhook_url or "").strip()
        self.timeout = timeout if timeout is not None else DEFAULT_HTTP_TIMEOUT

        if transport is None:
            self.transport: Any = requests.Session()
            self._owns_transport = True
        else:
            self.transport = transport
            self._owns_transport = False

    @classmethod
    def from_config(cls, transport: Optional[Any] = None) -> "TeamsClient":
        """Build a client from TEAMS_WEBHOOK_URL and TEAMS_HTTP_TIMEOUT."""
        return cls(config.teams_webhook_url, transport=transport, timeout=config.http_timeout)

    def set_transport(self, transport: Any) -> None:
        """
        Replace the HTTP transport, mainly for injecting test doubles.

        A session previously owned by the client is closed first.
        """
        if self._owns_transport:
            self.transport.close()
        self.transport = transport
        self._owns_transport = False

    def close(self) -> None:
        """Close the transport if the client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "TeamsClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def post_message(self, card: Card) -> bool:
        """
        Post a card to the webhook.

        Args:
            card: Card to post (may be empty)

        Returns:
            bool: True when Teams accepted the message

        Raises:
            UnauthorizedError: Webhook URL is empty, or Teams returned 401/403
            NotFoundError: Teams returned 404/405
            WebhookValidationError: Teams returned 422
            FailedActionError: Any other non-2xx status or a transport failure
        """
        tracking_id = generate_ulid()
        log = get_logger(__name__, tracking_id)

        if not self.webhook_url:
            log.warning("Teams webhook URL not configured, refusing to post")
            raise UnauthorizedError("Teams webhook URL is empty")

        payload = card.to_json()
        log.debug(f"Posting card with {len(card)} element(s)")

        try:
            response = self.transport.request(
                "POST", self.webhook_url, data=payload, headers=JSON_HEADERS, timeout=self.timeout
            )
        except Exception as e:
            # no response: the transport itself failed
            log.warning(f"Teams webhook request failed: {e} | error_type: {type(e).__name__}")
            raise FailedActionError(f"Teams webhook request failed: {e}") from e

        return self._handle_response(response, log)

    def _handle_response(self, response: Any, log) -> bool:
        """Classify the response by status code, raising on failure."""
        status = response.status_code

        if 200 <= status < 300:
            log.info(f"Posted card to Teams (status: {status})")
            return True

        body = _read_body(response)
        log.warning(f"Teams webhook error {status}: {body[:500]}")

        if status in (401, 403):
            raise UnauthorizedError(f"Teams rejected the webhook credentials (HTTP {status})", status)
        if status in (404, 405):
            raise NotFoundError(f"Teams webhook not found (HTTP {status})", status)
        if status == 422:
            raise WebhookValidationError(_decode_errors(body), status)

        raise FailedActionError(body or f"Teams webhook request failed (HTTP {status})", status)


def _read_body(response: Any) -> str:
    """Return the response body as text, or an empty string if unavailable."""
    text = getattr(response, "text", None)
    if isinstance(text, str):
        return text
    content = getattr(response, "content", None)
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return ""


def _decode_errors(body: str) -> dict[str, Any]:
    """Decode validation details from a JSON body; empty dict if not JSON."""
    if not body:
        return {}
    try:
        decoded = json.loads(body)
    except json.JSONDecodeError:
        logger.debug("422 response body is not JSON, ignoring")
        return {}
    if isinstance(decoded, dict):
        return decoded
    return {"errors": decoded}
