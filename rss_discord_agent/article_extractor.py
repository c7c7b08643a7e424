"""Article body extraction from a page's embedded preloaded state.

The article site renders from a ``window.__PRELOADED_STATE__`` JSON blob. The
blob has no published schema, so it is searched as a plain tree of dicts,
lists and scalars. The assignment is found with a non-greedy pattern that ends
at the first ``};``; a literal containing that sequence inside a string is cut
short and then fails JSON parsing, which is reported as a failed extraction.
"""

import json
import logging
import re
from typing import Any, Optional
from urllib.parse import urlparse

import requests

logger = logging.getLogger(__name__)

ARTICLE_FAILURE_TEXT = "Failed to extract article content."

PRELOADED_STATE_PATTERN = re.compile(
    r"window\.__PRELOADED_STATE__\s*=\s*({.*?});", re.DOTALL
)

# Decoded in this order, so "&amp;lt;" ends up as "<".
HTML_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def extract_text_from_html(html: str) -> str:
    """Strip tags, collapse whitespace and decode a few common entities."""
    text = re.sub(r"<[^>]*>", " ", html)
    text = re.sub(r"\s+", " ", text)
    for entity, char in HTML_ENTITIES:
        text = text.replace(entity, char)
    return text.strip()


def extract_preloaded_state(html: str) -> Optional[Any]:
    """
    Find and decode the preloaded state assignment in a page.

    Args:
        html: Page source.

    Returns:
        The decoded JSON value, or None if no assignment was found.

    Raises:
        ValueError: If the captured literal is not valid JSON.
    """
    match = PRELOADED_STATE_PATTERN.search(html)
    if not match:
        return None
    return json.loads(match.group(1))


def find_page_data(state: Any, path: str) -> Optional[Any]:
    """Return ``state["components"]["page"][path]`` or None if any level is missing."""
    components = state.get("components") if isinstance(state, dict) else None
    pages = components.get("page") if isinstance(components, dict) else None
    if not isinstance(pages, dict):
        return None
    return pages.get(path) or None


def find_content(node: Any) -> Optional[str]:
    """
    Depth-first search for the first ``config.content`` string.

    Lists are visited in index order and dicts in key order. When several
    nodes carry content, whichever is reached first wins.
    """
    if isinstance(node, dict):
        config = node.get("config")
        if isinstance(config, dict):
            content = config.get("content")
            if isinstance(content, str) and content:
                return content
        children = node.values()
    elif isinstance(node, list):
        children = node
    else:
        return None

    for child in children:
        content = find_content(child)
        if content:
            return content
    return None


def _page_path(url: str) -> str:
    return urlparse(url).path or "/"


def extract_article(url: str) -> str:
    """
    Fetch an article page and return its body as plain text.

    Never raises: every failure is logged and ARTICLE_FAILURE_TEXT is
    returned so that a notification can still be sent.

    Args:
        url: Absolute article URL from the feed.

    Returns:
        The article text, or ARTICLE_FAILURE_TEXT.
    """
    try:
        path = _page_path(url)
        response = requests.get(url)
        if not response.ok:
            logger.error(f"Failed to fetch page {url}: {response.status_code} {response.reason}")
            return ARTICLE_FAILURE_TEXT

        try:
            state = extract_preloaded_state(response.text)
        except ValueError as e:
            logger.error(f"Preloaded state is not valid JSON: {e}")
            return ARTICLE_FAILURE_TEXT
        if state is None:
            logger.error("Failed to extract JSON from script")
            return ARTICLE_FAILURE_TEXT

        page_data = find_page_data(state, path)
        if page_data is None:
            logger.error(f"Required structure not found in preloaded state for {path}")
            return ARTICLE_FAILURE_TEXT

        logger.debug("Searching for content in page data...")
        content = find_content(page_data)
        if not content:
            logger.error("No content found in the page data")
            return ARTICLE_FAILURE_TEXT

        text = extract_text_from_html(content)
        logger.info(f"Extracted article content ({len(text)} chars) from {url}")
        return text
    except Exception as e:
        logger.error(f"Error extracting article {url}: {e}", exc_info=True)
        return ARTICLE_FAILURE_TEXT
