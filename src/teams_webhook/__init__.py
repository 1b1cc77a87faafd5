"""Client library for posting Adaptive Cards to Microsoft Teams incoming webhooks."""

from teams_webhook.client import TeamsClient
from teams_webhook.exceptions import (
    FailedActionError,
    NotFoundError,
    TeamsWebhookError,
    UnauthorizedError,
    WebhookValidationError,
)
from teams_webhook.models import Card, CardElement, Fact, FactSet, Image, TextBlock

__all__ = [
    "Card",
    "CardElement",
    "Fact",
    "FactSet",
    "Image",
    "TextBlock",
    "TeamsClient",
    "TeamsWebhookError",
    "UnauthorizedError",
    "NotFoundError",
    "WebhookValidationError",
    "FailedActionError",
]
