import importlib.util
import json
from pathlib import Path
from unittest.mock import patch

import pytest

HANDLER_PATH = Path(__file__).resolve().parents[1] / "lambda-functions" / "feed-check" / "handler.py"


@pytest.fixture(scope="module")
def handler():
    spec = importlib.util.spec_from_file_location("feed_check_handler", HANDLER_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_get_feed_check_runs_pipeline(handler):
    with patch.object(handler, "run_feed_check", return_value=True) as run:
        result = handler.lambda_handler({"httpMethod": "GET", "path": "/feed-check"}, None)

    run.assert_called_once_with()
    assert result["statusCode"] == 200
    assert json.loads(result["body"]) == {"message": "Scheduled RSS check completed successfully"}


def test_unknown_route_returns_404(handler):
    with patch.object(handler, "run_feed_check") as run:
        assert handler.lambda_handler({"httpMethod": "GET", "path": "/other"}, None)["statusCode"] == 404
        assert handler.lambda_handler({"httpMethod": "POST", "path": "/feed-check"}, None)["statusCode"] == 404

    run.assert_not_called()


def test_exception_returns_500(handler):
    with patch.object(handler, "run_feed_check", side_effect=ValueError("Missing DISCORD_WEBHOOK")):
        result = handler.lambda_handler({"httpMethod": "GET", "path": "/feed-check"}, None)

    assert result["statusCode"] == 500
    assert json.loads(result["body"]) == {"message": "Internal server error"}


def test_scheduled_event_runs_and_never_fails(handler):
    event = {"source": "aws.events", "detail-type": "Scheduled Event"}

    with patch.object(handler, "run_feed_check", side_effect=RuntimeError("boom")) as run:
        result = handler.lambda_handler(event, None)

    run.assert_called_once_with()
    assert result["statusCode"] == 200


def test_run_feed_check_builds_fresh_pipeline(handler, app_config):
    with patch.object(handler, "load_config", return_value=app_config), \
            patch.object(handler, "FeedChecker") as checker_cls:
        checker_cls.return_value.perform.return_value = True
        assert handler.run_feed_check() is True

    checker_cls.assert_called_once_with(app_config)
