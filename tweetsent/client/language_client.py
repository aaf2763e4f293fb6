"""
Language Client.

Calls the Google Natural Language REST API to derive sentiment for a tweet:
entity-level sentiment for the top salience entity, and document-level
sentiment for the whole text.
"""

import logging
from typing import Optional

import requests

from tweetsent.client.config import LanguageApiConfig
from tweetsent.errors import (
    MalformedInputError,
    NoEntityFoundError,
    RemoteServiceError,
    TransportError,
)
from tweetsent.models.sentiment import EntitySentimentResult, Sentiment

logger = logging.getLogger(__name__)

REQUEST_HEADERS = {"Content-Type": "application/json; charset=utf-8"}


class LanguageClient:
    """
    Thin client over the analyzeEntitySentiment and analyzeSentiment methods.

    Each fetch issues exactly one POST. There is no retry and no caching:
    failures are logged with the operation name and re-raised.
    """

    def __init__(self, config: LanguageApiConfig, session: Optional[requests.Session] = None):
        """
        Initialize language client.

        Args:
            config: Endpoint, credential and document settings
            session: Optional requests session (a new one is created otherwise)
        """
        self.config = config
        self.session = session or requests.Session()

        logger.info(
            f"Initialized LanguageClient with api_version={config.api_version}, "
            f"language={config.language}, timeout={config.timeout_seconds}"
        )

    def fetch_entity_sentiment(self, text: str) -> EntitySentimentResult:
        """
        Derive sentiment on the top salience entity within a tweet.

        The API returns entities sorted by descending salience, so the first
        entity is the top one.

        Args:
            text: Tweet text

        Returns:
            EntitySentimentResult for the top salience entity

        Raises:
            NoEntityFoundError: If the API found no entities in the text
            RemoteServiceError: On a non-success HTTP status
            TransportError: If the API could not be reached
        """
        operation = "entitySentiment"
        data = self._post(operation, self.config.entity_sentiment_url, text)

        entities = data.get("entities") or []
        if not entities:
            logger.error(f"{operation}() - no entities found in response")
            raise NoEntityFoundError(f"{operation}() - no entities found in text")

        top_salience = entities[0]
        try:
            result = EntitySentimentResult(
                name=top_salience["name"],
                type=top_salience["type"],
                salience=top_salience.get("salience", 0.0),
                entity_sentiment=_decode_sentiment(operation, top_salience.get("sentiment"))
            )
        except (AttributeError, KeyError, TypeError) as e:
            logger.error(f"{operation}() - malformed entity in response: {e}")
            raise MalformedInputError(f"{operation}() - malformed entity: {e}") from e

        logger.debug(f"{operation}() top entity: {result.name} ({result.type}, salience={result.salience})")
        return result

    def fetch_document_sentiment(self, text: str) -> Sentiment:
        """
        Derive sentiment of the entire tweet.

        Args:
            text: Tweet text

        Returns:
            Document-level Sentiment

        Raises:
            MalformedInputError: If documentSentiment is not an object
            RemoteServiceError: On a non-success HTTP status
            TransportError: If the API could not be reached
        """
        operation = "sentiment"
        data = self._post(operation, self.config.sentiment_url, text)
        return _decode_sentiment(operation, data.get("documentSentiment"))

    def _post(self, operation: str, url: str, text: str) -> dict:
        """
        POST one document to the API and return the decoded JSON body.
        """
        logger.debug(f"{operation}()")

        body = {
            "document": {
                "type": self.config.document_type,
                "language": self.config.language,
                "content": text
            },
            "encodingType": self.config.encoding_type
        }

        try:
            response = self.session.post(
                url,
                params={"key": self.config.api_key},
                json=body,
                headers=REQUEST_HEADERS,
                timeout=self.config.timeout_seconds
            )
        except requests.RequestException as e:
            logger.error(f"{operation}() - {type(e).__name__}: {e}")
            raise TransportError(operation, e) from e

        if not response.ok:
            error = RemoteServiceError(response.status_code, operation, response.text)
            logger.error(str(error))
            raise error

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"{operation}() - response body is not valid JSON: {e}")
            raise MalformedInputError(f"{operation}() - response body is not valid JSON") from e

        if not isinstance(data, dict):
            logger.error(f"{operation}() - unexpected response body: {data!r}")
            raise MalformedInputError(f"{operation}() - expected a JSON object response")

        return data

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()


def _decode_sentiment(operation: str, data: Optional[dict]) -> Optional[Sentiment]:
    """
    Decode a `{magnitude, score}` object from the API.

    The API's JSON mapping drops numeric fields equal to zero, so a present
    object with a missing field means 0.0 (entity salience is decoded the
    same way). An absent object stays None and is rejected at aggregation
    time.
    """
    if data is None:
        return None
    if not isinstance(data, dict):
        logger.error(f"{operation}() - malformed sentiment in response: {data!r}")
        raise MalformedInputError(f"{operation}() - expected a sentiment object, got {data!r}")
    return Sentiment(
        magnitude=data.get("magnitude", 0.0),
        score=data.get("score", 0.0)
    )


# Design Rationale and Trade-offs:
#
# 1. REST over requests instead of the google-cloud-language SDK
#    - Only two methods are used and the API key goes in the query string
#    - Trade-off: Request and response shapes are maintained by hand
#
# 2. No retry and no cache
#    - Each fetch is exactly one POST; failures surface to the batch driver
#    - Trade-off: A transient 503 costs that tweet its result
#
# 3. First entity taken as top salience
#    - The API returns entities sorted by descending salience
#    - An empty list raises NoEntityFoundError instead of an IndexError
#
# 4. Zero defaults for omitted numeric fields
#    - Applies inside a present object only; a missing object stays None
#    - Trade-off: A truncated response can look like a neutral one
