"""
Tweet Source Reader.

Loads tweets from a JSON file, either a plain array of tweet objects or a
Twitter premium search response holding them under "results".
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from tweetsent.errors import ParseError
from tweetsent.models.tweet import TweetRecord

logger = logging.getLogger(__name__)


class TweetSourceReader:
    """
    Reads the whole input file into memory and parses it in one pass.

    Not streaming: fine for search API exports, which are small.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read_all(self, source_path: Union[str, Path]) -> List[TweetRecord]:
        """
        Load every tweet from the source file, in file order.

        Args:
            source_path: Path to a JSON file of tweets

        Returns:
            Ordered list of TweetRecord

        Raises:
            OSError: If the file cannot be read
            ParseError: If the content is not a recognized tweet document
        """
        path = Path(source_path)

        try:
            with open(path, "r", encoding=self.encoding) as f:
                content = f.read()
        except OSError as e:
            logger.error(f"Failed to read tweet file {path}: {e}")
            raise

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Tweet file {path} is not valid JSON: {e}")
            raise ParseError(f"{path}: invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e

        items = self._extract_items(data, path)

        tweets = []
        for index, item in enumerate(items):
            try:
                tweets.append(TweetRecord.from_dict(item))
            except ParseError as e:
                raise ParseError(f"{path}: record {index}: {e}") from e

        logger.info(f"Loaded {len(tweets)} tweets from {path}")
        return tweets

    def _extract_items(self, data, path: Path) -> list:
        """Return the list of tweet objects from a parsed document."""
        if isinstance(data, list):
            return data

        if isinstance(data, dict) and isinstance(data.get("results"), list):
            return data["results"]

        raise ParseError(
            f"{path}: expected a JSON array of tweets or an object with a 'results' array"
        )


# Design Rationale and Trade-offs:
#
# 1. Whole file read in one pass
#    - Search exports are small enough to hold in memory
#    - Trade-off: Memory grows with file size; no streaming
#
# 2. Two accepted shapes
#    - A bare array, or a premium search response with "results"
#    - Any other top-level shape is a ParseError
#
# 3. OSError propagated unchanged
#    - FileNotFoundError and PermissionError keep their types for the CLI
