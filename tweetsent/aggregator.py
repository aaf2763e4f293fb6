"""
Aggregator.

Merges entity-level and document-level sentiment for one tweet into a
single result with one derived score.
"""

import numbers
from typing import Optional

from tweetsent.errors import MalformedInputError
from tweetsent.models.sentiment import AggregateResult, EntitySentimentResult, Sentiment


def combine(
    tweet_text: str,
    entity_result: EntitySentimentResult,
    document_result: Optional[Sentiment]
) -> AggregateResult:
    """
    Combine the two sentiment records of a tweet.

    aggregate = mean(magnitudes) * mean(scores)

    Pure function: no I/O, same inputs give the same result.

    Raises:
        MalformedInputError: If a sentiment record or one of its numeric
            fields is missing
    """
    if entity_result is None:
        raise MalformedInputError("Entity sentiment result is missing")

    entity_sentiment = entity_result.entity_sentiment
    if entity_sentiment is None:
        raise MalformedInputError(f"Entity '{entity_result.name}' has no sentiment")
    if document_result is None:
        raise MalformedInputError("Document sentiment is missing")

    entity_magnitude = _require_number(entity_sentiment.magnitude, "entitySentiment.magnitude")
    entity_score = _require_number(entity_sentiment.score, "entitySentiment.score")
    document_magnitude = _require_number(document_result.magnitude, "documentSentiment.magnitude")
    document_score = _require_number(document_result.score, "documentSentiment.score")

    mag = (entity_magnitude + document_magnitude) / 2
    score = (entity_score + document_score) / 2

    return AggregateResult(
        tweet=tweet_text,
        name=entity_result.name,
        type=entity_result.type,
        salience=entity_result.salience,
        entity_sentiment=entity_sentiment,
        document_sentiment=document_result,
        aggregate=mag * score
    )


def _require_number(value, field_name: str) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise MalformedInputError(f"{field_name} must be a number, got {value!r}")
    return value


# Design Rationale and Trade-offs:
#
# 1. Plain function instead of a class
#    - combine() holds no state and performs no I/O
#
# 2. Equal weight for entity and document sentiment
#    - aggregate = mean(magnitudes) * mean(scores)
#    - Trade-off: A low-salience top entity counts as much as the whole text
#
# 3. Validation at aggregation time
#    - Missing or non-numeric fields raise MalformedInputError here
#    - bool values are rejected even though bool subclasses int
