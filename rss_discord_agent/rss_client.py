"""RSS feed client for fetching and parsing feed items.

Parsing is pattern based and tuned for a single known feed. It does not decode
XML entities, unwrap CDATA or understand namespaces; malformed documents yield
empty or partial fields instead of raising.
"""

import logging
import re

import requests

from .models import Channel, Feed, FeedItem

logger = logging.getLogger(__name__)

CHANNEL_PATTERN = re.compile(r"<channel>(.*?)</channel>", re.DOTALL)
ITEM_PATTERN = re.compile(r"<item>(.*?)</item>", re.DOTALL)


def extract_tag(content: str, tag_name: str) -> str:
    """
    Return the trimmed inner text of the first <tag_name> element.

    Args:
        content: Raw XML text to search.
        tag_name: Element name, e.g. "title".

    Returns:
        The inner text, or an empty string if the tag is missing.
    """
    pattern = rf"<{re.escape(tag_name)}>(.*?)</{re.escape(tag_name)}>"
    match = re.search(pattern, content, re.DOTALL)
    return match.group(1).strip() if match else ""


def _parse_item(content: str) -> FeedItem:
    link = extract_tag(content, "link")
    return FeedItem(
        title=extract_tag(content, "title"),
        link=link,
        description=extract_tag(content, "description"),
        pub_date=extract_tag(content, "pubDate"),
        guid=extract_tag(content, "guid") or link,
    )


def parse_feed(text: str) -> Feed:
    """
    Parse raw feed text into channel metadata and items.

    Args:
        text: The feed document.

    Returns:
        A Feed whose items keep document order (newest first for this feed).
    """
    channel_match = CHANNEL_PATTERN.search(text)
    channel_content = channel_match.group(1) if channel_match else ""

    channel = Channel(
        title=extract_tag(channel_content, "title"),
        description=extract_tag(channel_content, "description"),
        link=extract_tag(channel_content, "link"),
    )
    items = [_parse_item(block) for block in ITEM_PATTERN.findall(text)]
    return Feed(channel=channel, items=items)


def fetch_feed(url: str) -> Feed:
    """
    Fetch and parse a feed.

    Raises:
        requests.RequestException: On network errors or a non-2xx response.
    """
    logger.info(f"Fetching RSS feed: {url}")
    response = requests.get(url)
    response.raise_for_status()

    feed = parse_feed(response.text)
    logger.info(f"Extracted {len(feed.items)} items from {url}")
    return feed
