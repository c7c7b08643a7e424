"""Discord webhook notification module."""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional, Sequence

import requests
from dateutil import parser as date_parser

from .models import (
    MAX_EMBEDS_PER_MESSAGE,
    MAX_FIELD_NAME_LENGTH,
    MAX_FIELD_VALUE_LENGTH,
    Embed,
    WebhookPayload,
)

logger = logging.getLogger(__name__)


class EmbedValidationError(ValueError):
    """An embed cannot be sent as given."""


class DiscordDeliveryError(Exception):
    """The webhook answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Discord API responded with status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


def format_timestamp(dt: datetime) -> str:
    """Format as UTC ISO8601 with milliseconds, e.g. 2024-01-01T00:00:00.000Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_timestamp() -> str:
    return format_timestamp(datetime.now(timezone.utc))


def normalize_timestamp(value: str) -> Optional[str]:
    """Return value as ISO8601 UTC, or None if it cannot be parsed."""
    try:
        return format_timestamp(date_parser.parse(value))
    except (ValueError, OverflowError):
        return None


def _build_embed(embed: Embed) -> Embed:
    if not embed.title and not embed.description:
        raise EmbedValidationError("Each embed must contain either a title or description")

    changes = {}
    if embed.timestamp:
        timestamp = normalize_timestamp(embed.timestamp)
        if timestamp is None:
            logger.warning(f"Invalid timestamp format {embed.timestamp!r}, removing timestamp")
        changes["timestamp"] = timestamp

    if embed.fields:
        changes["fields"] = [
            replace(
                field,
                name=field.name[:MAX_FIELD_NAME_LENGTH],
                value=field.value[:MAX_FIELD_VALUE_LENGTH],
            )
            for field in embed.fields
        ]

    return replace(embed, **changes)


def build_embeds(embeds: Sequence[Embed]) -> List[Embed]:
    """
    Validate and normalize embeds before sending.

    The input embeds are left untouched; normalized copies are returned.
    Timestamps are rewritten as ISO8601 UTC (unparsable ones are dropped)
    and field names and values are cut to Discord's limits.

    Args:
        embeds: Embeds in display order.

    Returns:
        New, normalized embeds in the same order.

    Raises:
        EmbedValidationError: If an embed has neither title nor description,
            or if there are more embeds than one message allows.
    """
    if len(embeds) > MAX_EMBEDS_PER_MESSAGE:
        raise EmbedValidationError(
            f"A message can carry at most {MAX_EMBEDS_PER_MESSAGE} embeds, got {len(embeds)}"
        )
    return [_build_embed(embed) for embed in embeds]


class DiscordNotifier:
    """Posts embeds to a Discord webhook."""

    def __init__(self, webhook_url: str):
        self.webhook_url = webhook_url

    def send(self, payload: WebhookPayload) -> None:
        """
        Post one message to the webhook. No retry is attempted.

        Raises:
            DiscordDeliveryError: If Discord responds with a non-2xx status.
            requests.RequestException: On network errors.
        """
        response = requests.post(
            self.webhook_url,
            json=payload.to_dict(),
            headers={"Content-Type": "application/json"},
        )
        if not response.ok:
            raise DiscordDeliveryError(response.status_code, response.text)
        logger.info(f"Notification sent with {len(payload.embeds)} embeds")

    def perform(self, embeds: Sequence[Embed], content: Optional[str] = None) -> None:
        """Validate embeds and send them as a single message."""
        try:
            self.send(WebhookPayload(embeds=build_embeds(embeds), content=content))
        except Exception as e:
            logger.error(f"Error sending notification to Discord: {e}")
            raise
