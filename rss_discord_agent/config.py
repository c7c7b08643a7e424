"""Configuration management."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_FEED_URL = "https://www.technologyreview.com/topic/artificial-intelligence/feed"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1"
LLM_PROVIDERS = ("gemini", "openai")


@dataclass(frozen=True)
class FeedConfig:
    """RSS feed configuration."""
    url: str


@dataclass(frozen=True)
class DiscordConfig:
    """Discord webhook configuration."""
    webhook_url: str


@dataclass(frozen=True)
class LLMConfig:
    """LLM API configuration."""
    provider: str         # "gemini" or "openai"
    api_key: str          # may be empty; the client reports it at call time
    model: str
    base_url: Optional[str]
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration."""
    feed: FeedConfig
    discord: DiscordConfig
    llm: LLMConfig


def _optional_int(key: str) -> Optional[int]:
    value = os.getenv(key, "").strip()
    return int(value) if value else None


def _optional_float(key: str) -> Optional[float]:
    value = os.getenv(key, "").strip()
    return float(value) if value else None


def load_config(feed_url: Optional[str] = None) -> AppConfig:
    """
    Load configuration from environment variables.

    Args:
        feed_url: Overrides FEED_URL when given.

    Raises:
        ValueError: If DISCORD_WEBHOOK is missing or LLM_PROVIDER is unknown.
    """
    load_dotenv()

    webhook_url = os.getenv("DISCORD_WEBHOOK", "").strip()
    if not webhook_url:
        raise ValueError("Missing required environment variables: DISCORD_WEBHOOK")

    provider = os.getenv("LLM_PROVIDER", "gemini").strip().lower()
    # A missing key is not fatal here: the material embed degrades instead.
    if provider == "gemini":
        default_model = "gemini-1.5-flash"
        default_base_url = DEFAULT_GEMINI_BASE_URL
        api_key = os.getenv("GEMINI_API_KEY") or os.getenv("LLM_API_KEY") or ""
    elif provider == "openai":
        default_model = "gpt-4o-mini"
        default_base_url = None
        api_key = os.getenv("LLM_API_KEY") or ""
    else:
        raise ValueError(
            f"Unsupported LLM_PROVIDER {provider!r}; expected one of: {', '.join(LLM_PROVIDERS)}"
        )

    return AppConfig(
        feed=FeedConfig(
            url=feed_url or os.getenv("FEED_URL") or DEFAULT_FEED_URL,
        ),
        discord=DiscordConfig(
            webhook_url=webhook_url,
        ),
        llm=LLMConfig(
            provider=provider,
            api_key=api_key.strip(),
            model=os.getenv("LLM_MODEL", default_model),
            base_url=os.getenv("LLM_BASE_URL") or default_base_url,
            max_tokens=_optional_int("LLM_MAX_TOKENS"),
            temperature=_optional_float("LLM_TEMPERATURE"),
        ),
    )
