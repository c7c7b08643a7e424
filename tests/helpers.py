"""Shared fakes for the test suite."""

import json
from unittest.mock import MagicMock

FEED_URL = "https://feeds.example.com/ai/feed"
WEBHOOK_URL = "https://discord.example.com/api/webhooks/1/abc"


def fake_response(status_code=200, text="", json_data=None):
    """A stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = "OK" if response.ok else "Error"
    if json_data is not None:
        text = json.dumps(json_data)
        response.json.return_value = json_data
    else:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    response.text = text
    return response


def article_page(path, content):
    """HTML page embedding a preloaded state whose page data holds content."""
    state = {
        "components": {
            "page": {
                path: {
                    "layout": [
                        {"type": "header", "config": {"title": "Header"}},
                        {"type": "body", "children": [{"config": {"content": content}}]},
                    ]
                }
            }
        }
    }
    return (
        "<html><head><script>"
        f"window.__PRELOADED_STATE__ = {json.dumps(state)};"
        "</script></head><body></body></html>"
    )


def rss_document(*items):
    blocks = "".join(
        f"<item><title>{title}</title><link>{link}</link></item>" for title, link in items
    )
    return (
        '<?xml version="1.0"?><rss><channel><title>AI</title>'
        f"<link>https://example.com</link><description>AI news</description>{blocks}"
        "</channel></rss>"
    )
