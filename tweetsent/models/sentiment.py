"""
Sentiment data models.

Normalized forms of the Natural Language API responses and the merged
per-tweet result printed by the batch driver.
"""

import json
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Sentiment:
    """
    Sentiment record as returned by the API.

    magnitude >= 0 is the overall emotional weight, score in [-1, 1] is the
    polarity. Fields are None when the service did not supply them.
    """
    magnitude: Optional[float]
    score: Optional[float]

    @classmethod
    def from_dict(cls, data: dict) -> "Sentiment":
        """Create Sentiment from a `{magnitude, score}` JSON dict."""
        return cls(
            magnitude=data.get("magnitude"),
            score=data.get("score")
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "magnitude": self.magnitude,
            "score": self.score
        }


# Document-level sentiment has the same shape as entity sentiment
DocumentSentimentResult = Sentiment


@dataclass(frozen=True)
class EntitySentimentResult:
    """
    Sentiment attributed to the highest-salience entity of a tweet.
    """
    name: str
    type: str  # API entity type, e.g. "PERSON", "ORGANIZATION", "OTHER"
    salience: float  # Centrality of the entity to the text, 0-1
    entity_sentiment: Optional[Sentiment]  # None when the API omitted it


@dataclass(frozen=True)
class AggregateResult:
    """
    Merged entity and document sentiment for one tweet.

    `aggregate` is mean(magnitudes) * mean(scores) over the two sources.
    """
    tweet: str
    name: str
    type: str
    salience: float
    entity_sentiment: Sentiment
    document_sentiment: Sentiment
    aggregate: float

    @classmethod
    def from_dict(cls, data: dict) -> "AggregateResult":
        """Create AggregateResult from its serialized JSON dict."""
        return cls(
            tweet=data["tweet"],
            name=data["name"],
            type=data["type"],
            salience=data["salience"],
            entity_sentiment=Sentiment.from_dict(data["entitySentiment"]),
            document_sentiment=Sentiment.from_dict(data["documentSentiment"]),
            aggregate=data["aggregate"]
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict using the output field names."""
        return {
            "tweet": self.tweet,
            "name": self.name,
            "type": self.type,
            "salience": self.salience,
            "entitySentiment": self.entity_sentiment.to_dict(),
            "documentSentiment": self.document_sentiment.to_dict(),
            "aggregate": self.aggregate
        }

    def to_json(self, indent: int = 4) -> str:
        """Pretty-printed JSON text for output."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


# Design Rationale and Trade-offs:
#
# 1. Frozen dataclasses
#    - Results are created once per tweet and never mutated
#    - Trade-off: Corrections require building a new instance
#
# 2. One Sentiment type for entity and document sentiment
#    - Both API objects are {magnitude, score}
#    - DocumentSentimentResult is an alias, not a subclass
#
# 3. camelCase keys in to_dict()
#    - Output keys match the API field names (entitySentiment, documentSentiment)
#    - Trade-off: Python attribute names and JSON keys differ
