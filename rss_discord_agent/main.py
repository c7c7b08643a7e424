"""Main entry point for the RSS Discord agent."""

import argparse
import logging
import os
import sys

from .config import load_config
from .feed_checker import FeedChecker

# Configure logging
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def run_once(args=None) -> bool:
    """Run the feed check once. Returns True if the article was posted."""
    try:
        logger.info("Loading configuration...")
        config = load_config(feed_url=args.feed_url if args else None)
    except Exception as e:
        logger.error(f"Fatal error loading configuration: {e}", exc_info=True)
        sys.exit(1)

    sent = FeedChecker(config).perform()
    if sent:
        logger.info("Scheduled RSS check completed successfully")
    else:
        logger.warning("RSS check failed; an error notification was attempted")
    return sent


def main():
    """Main entry point with command-line argument parsing."""
    parser = argparse.ArgumentParser(
        description="Post the newest RSS article and its English study notes to Discord"
    )
    parser.add_argument(
        "--feed-url",
        type=str,
        default=None,
        help="Feed to check (overrides FEED_URL env var)"
    )
    args = parser.parse_args()
    run_once(args)


if __name__ == "__main__":
    main()
