"""
Pydantic models for Teams Adaptive Card payloads.

This module defines the card model posted to Teams incoming webhooks:
- Element variants (TextBlock, FactSet, Image) discriminated by `type`
- Card, an ordered sequence of elements wrapped in the message envelope
  the webhook expects
"""

import json
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
CARD_VERSION = "1.4"


# =============================================================================
# CARD ELEMENT MODELS
# =============================================================================


class CardElement(BaseModel):
    """
    Common behaviour for card elements.

    Elements are immutable once constructed and serialize to exactly one
    entry of the card body.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def serialize(self) -> dict[str, Any]:
        """Serialize element to its Adaptive Card JSON structure."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TextBlock(CardElement):
    """
    Block of text rendered in the card body.

    Presentation fields are only emitted when set, so a plain
    TextBlock("Hi") serializes to {"type": "TextBlock", "text": "Hi"}.
    """

    type: Literal["TextBlock"] = "TextBlock"
    text: str = Field(..., description="Text to display (supports a markdown subset)")
    weight: Optional[Literal["Lighter", "Default", "Bolder"]] = Field(default=None, description="Font weight")
    size: Optional[Literal["Small", "Default", "Medium", "Large", "ExtraLarge"]] = Field(
        default=None, description="Font size"
    )
    color: Optional[Literal["Default", "Dark", "Light", "Accent", "Good", "Warning", "Attention"]] = Field(
        default=None, description="Text color"
    )
    wrap: Optional[bool] = Field(default=None, description="Allow text to wrap")

    def __init__(self, text: str, **data: Any):
        super().__init__(text=text, **data)


class Fact(BaseModel):
    """Title-value pair displayed inside a FactSet."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Fact label")
    value: str = Field(..., description="Fact value")

    def __init__(self, title: str, value: str, **data: Any):
        super().__init__(title=title, value=value, **data)


class FactSet(CardElement):
    """Series of facts displayed as a two-column table."""

    type: Literal["FactSet"] = "FactSet"
    facts: tuple[Fact, ...] = Field(default=(), description="Facts in display order")

    def __init__(self, facts: Optional[Any] = None, **data: Any):
        super().__init__(facts=tuple(facts or ()), **data)

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> "FactSet":
        """Build a FactSet from a mapping, preserving its key order."""
        return cls([Fact(str(k), str(v)) for k, v in values.items()])


class Image(CardElement):
    """Image referenced by URL."""

    type: Literal["Image"] = "Image"
    url: str = Field(..., description="Image URL")
    alt_text: Optional[str] = Field(default=None, alias="altText", description="Accessible description")
    size: Optional[Literal["Auto", "Stretch", "Small", "Medium", "Large"]] = Field(
        default=None, description="Rendered size"
    )

    def __init__(self, url: str, **data: Any):
        super().__init__(url=url, **data)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Ensure image URL is HTTP(S) or an inline data URI"""
        if not v.startswith(("https://", "http://", "data:")):
            raise ValueError("url must be http(s) or a data URI")
        return v


Element = Annotated[Union[TextBlock, FactSet, Image], Field(discriminator="type")]


# =============================================================================
# CARD MODEL
# =============================================================================


class Card(BaseModel):
    """
    Adaptive Card posted to a Teams incoming webhook.

    Holds an ordered sequence of elements. Elements are appended without
    validation and keep insertion order in the serialized body; an empty
    card serializes to an empty body.

    Usage:
        card = Card()
        card.add_element(TextBlock("Deployment finished"))
        payload = card.serialize()
    """

    body: list[Element] = Field(default_factory=list, description="Elements in display order")

    def add_element(self, element: CardElement) -> "Card":
        """Append an element to the card body."""
        self.body.append(element)
        return self

    @property
    def elements(self) -> tuple[CardElement, ...]:
        """Current elements in insertion order."""
        return tuple(self.body)

    def __len__(self) -> int:
        return len(self.body)

    def serialize(self) -> dict[str, Any]:
        """
        Build the webhook payload.

        The Adaptive Card is wrapped in the message envelope with an
        attachments array, which is the shape Teams webhooks accept.

        Returns:
            dict: JSON-compatible message payload
        """
        return {
            "type": "message",
            "attachments": [
                {
                    "contentType": CARD_CONTENT_TYPE,
                    "contentUrl": None,
                    "content": {
                        "$schema": CARD_SCHEMA,
                        "type": "AdaptiveCard",
                        "version": CARD_VERSION,
                        "body": [element.serialize() for element in self.body],
                    },
                }
            ],
        }

    def to_json(self) -> str:
        """Serialize the payload to JSON text."""
        return json.dumps(self.serialize())
