"""Feed check pipeline: newest item -> article text -> study material -> Discord."""

import logging
from typing import Optional

from .article_extractor import extract_article
from .config import AppConfig, LLMConfig
from .discord_notifier import DiscordNotifier, utc_now_timestamp
from .gemini_client import GeminiLLMClient
from .llm_client import LLMClient
from .material_generator import MATERIAL_FAILURE_TEXT, generate_material
from .models import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH, Embed
from .rss_client import fetch_feed

logger = logging.getLogger(__name__)

ERROR_TITLE = "Error Processing RSS Feed"
ERROR_COLOR = 0xFF0000
MAX_ERROR_DESCRIPTION_LENGTH = 2048


def create_llm_client(config: LLMConfig) -> LLMClient:
    """Create an LLM client based on configuration."""
    if config.provider == "openai":
        from .openai_client import OpenAILLMClient
        return OpenAILLMClient(config)
    return GeminiLLMClient(config)


class FeedChecker:
    """
    Runs one feed check.

    Article extraction and material generation degrade to placeholder text
    on failure. Anything that raises (feed fetch, embed validation, delivery)
    is caught once in perform() and reported as a single error embed.
    """

    def __init__(
        self,
        config: AppConfig,
        llm_client: Optional[LLMClient] = None,
        notifier: Optional[DiscordNotifier] = None,
    ):
        self.config = config
        self.llm_client = llm_client
        self.notifier = notifier or DiscordNotifier(config.discord.webhook_url)

    def perform(self) -> bool:
        """
        Process the newest feed item. Never raises.

        Returns:
            True if the article notification was sent, False if the error
            path was taken instead.
        """
        feed_url = self.config.feed.url
        try:
            self._process(feed_url)
            return True
        except Exception as e:
            logger.error(f"Error processing feed {feed_url}: {e}", exc_info=True)
            self._notify_error(e)
            return False

    def _process(self, feed_url: str) -> None:
        feed = fetch_feed(feed_url)
        if not feed.items:
            raise ValueError(f"Feed {feed_url} contained no items")
        item = feed.items[0]
        logger.info(f"Processing newest item: {item.title} ({item.link})")

        content = extract_article(item.link)
        material = self._generate_material(content)

        article_embed = Embed(
            title=item.title[:MAX_TITLE_LENGTH],
            url=item.link,
        )
        material_embed = Embed(
            description=material[:MAX_DESCRIPTION_LENGTH],
        )
        self.notifier.perform([article_embed, material_embed])

    def _generate_material(self, content: str) -> str:
        try:
            client = self.llm_client or create_llm_client(self.config.llm)
        except Exception as e:
            logger.error(f"Could not create LLM client ({self.config.llm.provider}): {e}")
            return MATERIAL_FAILURE_TEXT
        return generate_material(content, client, self.config.llm)

    def _notify_error(self, error: Exception) -> None:
        message = str(error) or error.__class__.__name__
        error_embed = Embed(
            title=ERROR_TITLE,
            description=message[:MAX_ERROR_DESCRIPTION_LENGTH],
            color=ERROR_COLOR,
            timestamp=utc_now_timestamp(),
        )
        try:
            self.notifier.perform([error_embed])
        except Exception as notification_error:
            logger.error(f"Failed to send error notification: {notification_error}")
