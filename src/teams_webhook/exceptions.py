"""
Exception taxonomy for Teams webhook failures.

Every failure raised by TeamsClient.post_message derives from
TeamsWebhookError so callers can catch the whole family at once:
- UnauthorizedError: missing webhook URL, 401 or 403
- NotFoundError: 404 or 405
- WebhookValidationError: 422, carries the decoded response body
- FailedActionError: any other non-2xx status or a transport failure
"""

from typing import Any, Optional


class TeamsWebhookError(Exception):
    """Base class for all Teams webhook failures."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UnauthorizedError(TeamsWebhookError):
    """Webhook URL is missing or was rejected by Teams."""


class NotFoundError(TeamsWebhookError):
    """Webhook endpoint does not exist or does not accept the request method."""


class WebhookValidationError(TeamsWebhookError):
    """
    Teams rejected the payload as unprocessable.

    The decoded JSON response body (if any) is available as `errors`.
    """

    def __init__(self, errors: Optional[dict[str, Any]] = None, status_code: Optional[int] = 422):
        self.errors = errors or {}
        super().__init__(f"The given data failed to pass validation: {self.errors}", status_code)


class FailedActionError(TeamsWebhookError):
    """Request failed for a reason not covered by a more specific error."""
