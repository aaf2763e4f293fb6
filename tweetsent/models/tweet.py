"""
Tweet data model.

Represents one tweet loaded from the input file.
"""

from dataclasses import dataclass
from typing import Optional

from tweetsent.errors import ParseError


@dataclass(frozen=True)
class TweetRecord:
    """
    A single tweet from the source file.
    Only the text is analyzed; id and timestamp are carried for logging.
    """
    text: str  # Raw tweet text, sent to the API unmodified
    tweet_id: Optional[str] = None  # id_str from the Twitter payload
    created_at: Optional[str] = None  # Twitter timestamp string, not parsed

    @classmethod
    def from_dict(cls, data: dict) -> "TweetRecord":
        """
        Create TweetRecord from a tweet object of a Twitter search payload.

        Raises:
            ParseError: If the object has no string `text` field
        """
        if not isinstance(data, dict):
            raise ParseError(f"Tweet must be a JSON object, got {type(data).__name__}")

        text = data.get("text")
        if not isinstance(text, str):
            raise ParseError("Tweet object is missing a string 'text' field")

        tweet_id = data.get("id_str")
        if tweet_id is None and data.get("id") is not None:
            tweet_id = str(data["id"])

        return cls(
            text=text,
            tweet_id=tweet_id,
            created_at=data.get("created_at")
        )

    def label(self) -> str:
        """Short identifier for log lines."""
        if self.tweet_id:
            return f"tweet {self.tweet_id}"
        preview = self.text[:30].replace("\n", " ")
        return f'tweet "{preview}"'
