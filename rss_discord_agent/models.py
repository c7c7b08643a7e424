"""Data models for feed items and Discord notifications."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

MAX_TITLE_LENGTH = 256
MAX_DESCRIPTION_LENGTH = 4096
MAX_FIELD_NAME_LENGTH = 256
MAX_FIELD_VALUE_LENGTH = 1024
MAX_EMBEDS_PER_MESSAGE = 10


@dataclass(frozen=True)
class FeedItem:
    """Represents an RSS feed item."""
    title: str
    link: str
    description: str  # may be empty
    pub_date: str     # raw <pubDate> text
    guid: str         # guid or link


@dataclass(frozen=True)
class Channel:
    """Feed-level metadata from the <channel> block."""
    title: str
    description: str
    link: str


@dataclass
class Feed:
    """A parsed feed: channel metadata plus items in document order."""
    channel: Channel
    items: List[FeedItem] = field(default_factory=list)


@dataclass(frozen=True)
class EmbedField:
    """A name/value pair shown inside an embed."""
    name: str
    value: str
    inline: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "value": self.value}
        if self.inline is not None:
            data["inline"] = self.inline
        return data


@dataclass(frozen=True)
class Embed:
    """One Discord embed (notification card). Every attribute is optional."""
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    color: Optional[int] = None  # 24-bit RGB
    fields: Optional[List[EmbedField]] = None
    timestamp: Optional[str] = None  # ISO8601

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the webhook JSON shape, omitting unset attributes."""
        data: Dict[str, Any] = {}
        for key in ("title", "description", "url", "color", "timestamp"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.fields is not None:
            data["fields"] = [f.to_dict() for f in self.fields]
        return data


@dataclass
class WebhookPayload:
    """A single webhook message: optional content plus up to 10 embeds."""
    embeds: List[Embed]
    content: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"embeds": [e.to_dict() for e in self.embeds]}
        if self.content is not None:
            data["content"] = self.content
        return data
