import json
from unittest.mock import patch

import pytest
import requests

from rss_discord_agent.article_extractor import (
    ARTICLE_FAILURE_TEXT,
    extract_article,
    extract_preloaded_state,
    extract_text_from_html,
    find_content,
    find_page_data,
)

from helpers import article_page, fake_response

ARTICLE_URL = "https://www.example.com/2024/05/01/1092/ai-story/"
ARTICLE_PATH = "/2024/05/01/1092/ai-story/"


def _get(page):
    return patch("rss_discord_agent.article_extractor.requests.get", return_value=page)


def test_extract_article_returns_plain_text():
    html = article_page(ARTICLE_PATH, "<p>Hello <b>world</b>.</p><p>Tom &amp; Jerry &#39;ok&#39;</p>")

    with _get(fake_response(text=html)) as get:
        text = extract_article(ARTICLE_URL)

    get.assert_called_once_with(ARTICLE_URL)
    assert text == "Hello world . Tom & Jerry 'ok'"


def test_extract_article_single_paragraph():
    with _get(fake_response(text=article_page(ARTICLE_PATH, "<p>Hello world.</p>"))):
        assert extract_article(ARTICLE_URL) == "Hello world."


def test_no_preloaded_state_returns_failure_text():
    with _get(fake_response(text="<html><body>No state here</body></html>")):
        assert extract_article(ARTICLE_URL) == ARTICLE_FAILURE_TEXT


def test_http_error_returns_failure_text():
    with _get(fake_response(status_code=500, text="oops")):
        assert extract_article(ARTICLE_URL) == ARTICLE_FAILURE_TEXT


def test_network_error_returns_failure_text():
    with patch(
        "rss_discord_agent.article_extractor.requests.get",
        side_effect=requests.ConnectionError("connection refused"),
    ):
        assert extract_article(ARTICLE_URL) == ARTICLE_FAILURE_TEXT


def test_invalid_json_returns_failure_text():
    html = "<script>window.__PRELOADED_STATE__ = {not json};</script>"

    with _get(fake_response(text=html)):
        assert extract_article(ARTICLE_URL) == ARTICLE_FAILURE_TEXT


def test_missing_page_path_returns_failure_text():
    html = article_page("/some/other/article/", "<p>Elsewhere</p>")

    with _get(fake_response(text=html)):
        assert extract_article(ARTICLE_URL) == ARTICLE_FAILURE_TEXT


def test_page_without_content_returns_failure_text():
    state = {"components": {"page": {ARTICLE_PATH: {"config": {"title": "No body"}}}}}
    html = f"<script>window.__PRELOADED_STATE__={json.dumps(state)};</script>"

    with _get(fake_response(text=html)):
        assert extract_article(ARTICLE_URL) == ARTICLE_FAILURE_TEXT


def test_extract_preloaded_state_stops_at_first_terminator():
    html = (
        '<script>window.__PRELOADED_STATE__ = {"a": {"b": 1}};\n'
        "var other = {};</script>"
    )

    assert extract_preloaded_state(html) == {"a": {"b": 1}}
    assert extract_preloaded_state("<script>var x = 1;</script>") is None


def test_extract_preloaded_state_raises_on_bad_json():
    with pytest.raises(ValueError):
        extract_preloaded_state("window.__PRELOADED_STATE__ = {'single': 'quotes'};")


def test_find_page_data():
    state = {"components": {"page": {"/a/": {"x": 1}}}}

    assert find_page_data(state, "/a/") == {"x": 1}
    assert find_page_data(state, "/b/") is None
    assert find_page_data({"components": []}, "/a/") is None
    assert find_page_data([], "/a/") is None


def test_find_content_searches_lists_and_dicts():
    tree = {
        "meta": {"config": {"content": ""}},
        "blocks": [
            "scalar",
            42,
            None,
            [{"config": "not a dict"}],
            {"nested": {"config": {"content": "<p>found</p>"}}},
        ],
    }

    assert find_content(tree) == "<p>found</p>"


def test_find_content_first_match_wins():
    tree = [
        {"config": {"content": "first"}},
        {"config": {"content": "second"}},
    ]

    assert find_content(tree) == "first"
    assert find_content({"config": {"content": 7}}) is None
    assert find_content("text") is None


def test_extract_text_from_html_whitelist_only():
    html = "<div>\n  A&nbsp;B &lt;tag&gt; &quot;q&quot; &copy; &#8217;</div>"

    assert extract_text_from_html(html) == "A B <tag> \"q\" &copy; &#8217;"


def test_extract_text_from_html_decodes_in_fixed_order():
    assert extract_text_from_html("&amp;lt;") == "<"
