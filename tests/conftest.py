import pytest

from rss_discord_agent.config import AppConfig, DiscordConfig, FeedConfig, LLMConfig

from helpers import FEED_URL, WEBHOOK_URL


@pytest.fixture
def app_config():
    return AppConfig(
        feed=FeedConfig(url=FEED_URL),
        discord=DiscordConfig(webhook_url=WEBHOOK_URL),
        llm=LLMConfig(
            provider="gemini",
            api_key="test-key",
            model="gemini-1.5-flash",
            base_url="https://generativelanguage.googleapis.com/v1",
        ),
    )
