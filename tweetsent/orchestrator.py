"""
Batch Driver.

Runs the per-tweet pipeline (entity sentiment → document sentiment →
aggregation) over a batch of tweets on a bounded worker pool and emits
each result.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, List

from tweetsent.aggregator import combine
from tweetsent.client.language_client import LanguageClient
from tweetsent.errors import TweetSentimentError
from tweetsent.models.sentiment import AggregateResult
from tweetsent.models.tweet import TweetRecord

logger = logging.getLogger(__name__)


class SentimentPipeline:
    """
    Processes one tweet to completion.

    The two API calls are sequential: document sentiment is only requested
    once entity sentiment has succeeded.
    """

    def __init__(self, client: LanguageClient):
        self.client = client

    def analyze(self, tweet: TweetRecord) -> AggregateResult:
        """
        Derive entity and document sentiment for a tweet and merge them.

        Raises:
            TweetSentimentError: Any client or aggregation failure
        """
        entity_result = self.client.fetch_entity_sentiment(tweet.text)
        document_result = self.client.fetch_document_sentiment(tweet.text)
        return combine(tweet.text, entity_result, document_result)


@dataclass
class TweetFailure:
    """A tweet whose pipeline raised, with its position in the input."""
    index: int
    tweet: TweetRecord
    error: Exception


@dataclass
class BatchReport:
    """Outcome of one batch run."""
    total: int
    results: List[AggregateResult] = field(default_factory=list)  # In emission order
    failures: List[TweetFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return len(self.failures)


class BatchDriver:
    """
    Dispatches tweet pipelines to a fixed-size thread pool.

    At most `max_workers` tweets have API calls in flight at once. Results
    are handed to `sink` from the calling thread only, either in input order
    (`preserve_order=True`) or in completion order.
    """

    def __init__(
        self,
        pipeline: SentimentPipeline,
        sink: Callable[[AggregateResult], None],
        max_workers: int = 4,
        preserve_order: bool = True,
        continue_on_failure: bool = True
    ):
        """
        Initialize batch driver.

        Args:
            pipeline: Per-tweet pipeline
            sink: Called once per successful result
            max_workers: Maximum tweet pipelines in flight
            preserve_order: Emit in input order instead of completion order
            continue_on_failure: Keep going after a tweet fails
        """
        if max_workers < 1:
            raise ValueError(f"Invalid max_workers: {max_workers}. Must be >= 1")

        self.pipeline = pipeline
        self.sink = sink
        self.max_workers = max_workers
        self.preserve_order = preserve_order
        self.continue_on_failure = continue_on_failure

    def run(self, tweets: Iterable[TweetRecord]) -> BatchReport:
        """
        Process every tweet and emit each successful result.

        Args:
            tweets: Ordered tweets to analyze

        Returns:
            BatchReport with emitted results and per-tweet failures

        Raises:
            Exception: The first tweet failure, only when continue_on_failure is False.
                Any error that aborts the batch cancels tweets not yet started.
        """
        tweets = list(tweets)
        report = BatchReport(total=len(tweets))

        if not tweets:
            logger.warning("No tweets to process")
            return report

        logger.info(
            f"Starting batch: {len(tweets)} tweets, max_workers={self.max_workers}, "
            f"order={'input' if self.preserve_order else 'completion'}"
        )
        start_time = datetime.now()

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="tweet") as executor:
            futures = {
                executor.submit(self.pipeline.analyze, tweet): index
                for index, tweet in enumerate(tweets)
            }
            pending = list(futures) if self.preserve_order else as_completed(futures)

            try:
                for future in pending:
                    index = futures[future]
                    tweet = tweets[index]

                    try:
                        result = future.result()
                    except Exception as e:
                        self._log_failure(index, tweet, e)
                        report.failures.append(TweetFailure(index=index, tweet=tweet, error=e))
                        if self.continue_on_failure:
                            continue
                        raise

                    self.sink(result)
                    report.results.append(result)
            except BaseException:
                # Queued tweets must not reach the API once the batch is aborted
                logger.warning("Batch aborted, cancelling tweets not yet started")
                executor.shutdown(wait=False, cancel_futures=True)
                raise

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(
            f"Batch complete in {elapsed:.2f}s: {report.succeeded} succeeded, "
            f"{report.failed} failed"
        )
        return report

    def _log_failure(self, index: int, tweet: TweetRecord, error: Exception) -> None:
        message = f"Failed to process tweet #{index + 1} ({tweet.label()}): {error}"
        if isinstance(error, TweetSentimentError):
            logger.error(message)
        else:
            # Not one of ours; keep the traceback
            logger.error(message, exc_info=error)


# Design Rationale and Trade-offs:
#
# 1. Bounded thread pool instead of one task per tweet
#    - At most max_workers tweets have requests open against the API
#    - Trade-off: Large batches take longer than unbounded launches
#
# 2. Emission on the calling thread only
#    - The sink is never called concurrently, so records never interleave
#    - In input order, a slow early tweet holds back finished later ones
#
# 3. Per-tweet failures recorded, not raised
#    - One failed tweet leaves the other results intact
#    - Trade-off: Caller must inspect BatchReport.failures or the log
#
# 4. Cancellation on abort
#    - Tweets not yet started are cancelled; running ones finish their call
#    - A stalled call still blocks shutdown when no timeout is configured
