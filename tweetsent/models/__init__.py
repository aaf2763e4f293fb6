"""
Data models for tweetsent.

- TweetRecord: one input tweet
- Sentiment / EntitySentimentResult: normalized API responses
- AggregateResult: the merged per-tweet output record
"""

from tweetsent.models.tweet import TweetRecord
from tweetsent.models.sentiment import (
    AggregateResult,
    DocumentSentimentResult,
    EntitySentimentResult,
    Sentiment,
)

__all__ = [
    "TweetRecord",
    "Sentiment",
    "DocumentSentimentResult",
    "EntitySentimentResult",
    "AggregateResult",
]
