"""
Lambda function to run the RSS feed check.
Triggered by an EventBridge schedule, or on demand via API Gateway GET /feed-check.
"""

import json
import logging
from typing import Dict, Any

from rss_discord_agent.config import load_config
from rss_discord_agent.feed_checker import FeedChecker

# Configure logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

SUCCESS_MESSAGE = "Scheduled RSS check completed successfully"


def is_scheduled_event(event: Dict[str, Any]) -> bool:
    """Check whether the event came from an EventBridge schedule."""
    return event.get('source') == 'aws.events' or event.get('detail-type') == 'Scheduled Event'


def run_feed_check() -> bool:
    """Load configuration and run one feed check with a fresh pipeline."""
    config = load_config()
    return FeedChecker(config).perform()


def handle_scheduled(event: Dict[str, Any]) -> Dict[str, Any]:
    try:
        run_feed_check()
        logger.info(SUCCESS_MESSAGE)
    except Exception as e:
        logger.error(f"Error in scheduled RSS check: {str(e)}", exc_info=True)
    return {'statusCode': 200, 'body': json.dumps({'message': 'Scheduled run finished'})}


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Run the feed check.

    Routes:
    - scheduled event - run and log the outcome
    - GET /feed-check - run on demand
    """
    if is_scheduled_event(event):
        return handle_scheduled(event)

    headers = {'Content-Type': 'application/json'}
    try:
        http_method = event.get('httpMethod', '')
        path = event.get('path', '')

        if path == '/feed-check' and http_method == 'GET':
            run_feed_check()
            return {
                'statusCode': 200,
                'headers': headers,
                'body': json.dumps({'message': SUCCESS_MESSAGE})
            }

        return {
            'statusCode': 404,
            'headers': headers,
            'body': json.dumps({'message': 'Not found'})
        }

    except Exception as e:
        logger.error(f"Error processing request: {str(e)}", exc_info=True)
        return {
            'statusCode': 500,
            'headers': headers,
            'body': json.dumps({'message': 'Internal server error'})
        }
