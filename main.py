"""
tweetsent - Tweet Sentiment Analysis

CLI entry point for running the sentiment batch.
"""

import argparse
import logging
import sys

from tweetsent.client import LanguageApiConfig, LanguageClient
from tweetsent.errors import TweetSentimentError
from tweetsent.orchestrator import BatchDriver, SentimentPipeline
from tweetsent.sources.reader import TweetSourceReader
from tweetsent.utils.output import format_summary, stream_sink, summarize
import config.settings as settings

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_PARTIAL = 2


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="tweetsent - Entity and document sentiment for tweets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze ./tweets.json, results in input order
  python main.py

  # Analyze a search export with 8 tweets in flight
  python main.py --input data/search_results.json --max-workers 8

  # Print results as they complete and a summary at the end
  python main.py --completion-order --summary

Note: Set GOOGLE_KEY environment variable (or .env entry) before running.
        """
    )

    parser.add_argument(
        "--input",
        default=settings.TWEETS_FILE,
        help=f"JSON file of tweets (default: {settings.TWEETS_FILE})"
    )

    parser.add_argument(
        "--max-workers",
        type=int,
        default=settings.MAX_WORKERS,
        help=f"Tweets processed concurrently (default: {settings.MAX_WORKERS})"
    )

    parser.add_argument(
        "--completion-order",
        action="store_true",
        default=not settings.PRESERVE_INPUT_ORDER,
        help="Print results as they complete instead of in input order"
    )

    parser.add_argument(
        "--fail-fast",
        action="store_true",
        default=not settings.CONTINUE_ON_TWEET_FAILURE,
        help="Abort the batch on the first failed tweet"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.REQUEST_TIMEOUT_SECONDS,
        help="Per-request timeout in seconds (default: no timeout)"
    )

    parser.add_argument(
        "--language",
        default=settings.DOCUMENT_LANGUAGE,
        help=f"Document language code (default: {settings.DOCUMENT_LANGUAGE})"
    )

    parser.add_argument(
        "--api-version",
        default=settings.LANGUAGE_API_VERSION,
        help=f"Natural Language API version (default: {settings.LANGUAGE_API_VERSION})"
    )

    parser.add_argument(
        "--summary",
        action="store_true",
        help="Write a summary of the batch to stderr when done"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    # Setup logging
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    # Validate API key
    if not settings.GOOGLE_KEY:
        logger.error(
            "GOOGLE_KEY environment variable not set. "
            "Please set it before running tweetsent."
        )
        sys.exit(EXIT_FATAL)

    client = None
    try:
        config = LanguageApiConfig(
            api_key=settings.GOOGLE_KEY,
            base_url=settings.LANGUAGE_API_BASE_URL,
            api_version=args.api_version,
            language=args.language,
            document_type=settings.DOCUMENT_TYPE,
            encoding_type=settings.ENCODING_TYPE,
            timeout_seconds=args.timeout
        )

        tweets = TweetSourceReader().read_all(args.input)

        client = LanguageClient(config)
        driver = BatchDriver(
            pipeline=SentimentPipeline(client),
            sink=stream_sink(indent=settings.OUTPUT_INDENT),
            max_workers=args.max_workers,
            preserve_order=not args.completion_order,
            continue_on_failure=not args.fail_fast
        )

        report = driver.run(tweets)

    except KeyboardInterrupt:
        logger.warning("Batch interrupted by user")
        sys.exit(EXIT_FATAL)

    except (TweetSentimentError, OSError, ValueError) as e:
        logger.error(f"Batch failed: {e}")
        sys.exit(EXIT_FATAL)

    except Exception as e:
        logger.error(f"Batch failed: {e}", exc_info=True)
        sys.exit(EXIT_FATAL)

    finally:
        if client is not None:
            client.close()

    if args.summary:
        print(format_summary(summarize(report.results)), file=sys.stderr)

    if report.failed:
        logger.warning(f"{report.failed} of {report.total} tweets failed")
        sys.exit(EXIT_PARTIAL)

    logger.info("tweetsent completed successfully")
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()


# Design Rationale and Trade-offs:
#
# 1. argparse for the CLI
#    - Flags override config.settings defaults for a single run
#
# 2. API key validated before reading input
#    - A missing key exits 1 without touching the tweet file
#    - Trade-off: --help is the only command that runs without a key
#
# 3. Logs on stderr and in tweetsent.log
#    - stdout is reserved for result records
#    - Trade-off: Two log destinations to check
#
# 4. Exit codes 0, 1 and 2
#    - 2 marks a completed batch with failed tweets, distinct from a fatal 1
