"""
Exception taxonomy for tweetsent.

Every error raised by the package derives from TweetSentimentError so the
batch driver and the CLI can tell expected failures from programming bugs.
"""

from typing import Optional


class TweetSentimentError(Exception):
    """Base class for all tweetsent errors."""
    pass


class TransportError(TweetSentimentError):
    """
    Raised when the Natural Language API cannot be reached at all
    (connection refused, DNS failure, timeout).
    """

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation}() transport failure: {cause}")


class RemoteServiceError(TweetSentimentError):
    """Raised when the Natural Language API answers with a non-success status."""

    def __init__(self, status_code: int, operation: str = "", body: Optional[str] = None):
        self.status_code = status_code
        self.operation = operation
        self.body = body
        prefix = f"{operation}() - " if operation else ""
        super().__init__(f"{prefix}response status: {status_code}")


class NoEntityFoundError(TweetSentimentError):
    """Raised when entity sentiment analysis returns no entities for a tweet."""
    pass


class MalformedInputError(TweetSentimentError):
    """Raised when a response or result lacks the expected numeric fields."""
    pass


class ParseError(TweetSentimentError):
    """Raised when the tweet source file cannot be parsed into tweet records."""
    pass
