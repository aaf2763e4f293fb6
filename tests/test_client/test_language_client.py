"""
Unit tests for LanguageClient.

Note: These tests use a mocked requests session; no network calls are made.
"""

import logging

import pytest
import requests
from unittest.mock import MagicMock

from tweetsent.client.config import LanguageApiConfig
from tweetsent.client.language_client import LanguageClient
from tweetsent.errors import (
    MalformedInputError,
    NoEntityFoundError,
    RemoteServiceError,
    TransportError,
)
from tweetsent.models.sentiment import Sentiment


ENTITY_RESPONSE = {
    "entities": [
        {
            "name": "Google",
            "type": "ORGANIZATION",
            "metadata": {},
            "salience": 0.82,
            "mentions": [],
            "sentiment": {"magnitude": 0.8, "score": 0.6}
        },
        {
            "name": "lunch",
            "type": "OTHER",
            "salience": 0.18,
            "sentiment": {"magnitude": 0.1, "score": -0.1}
        }
    ],
    "language": "en"
}

DOCUMENT_RESPONSE = {
    "documentSentiment": {"magnitude": 0.4, "score": -0.2},
    "language": "en",
    "sentences": []
}


def make_response(payload=None, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = "" if payload is None else str(payload)
    response.json.return_value = payload
    return response


@pytest.fixture
def config():
    return LanguageApiConfig(api_key="test-key", timeout_seconds=5.0)


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(config, session):
    return LanguageClient(config, session=session)


def test_endpoint_urls(config):
    """Test endpoint URLs are built from base URL and version."""
    assert config.entity_sentiment_url == (
        "https://language.googleapis.com/v1beta2/documents:analyzeEntitySentiment"
    )
    assert config.sentiment_url == (
        "https://language.googleapis.com/v1beta2/documents:analyzeSentiment"
    )


def test_config_hides_api_key(config):
    """Test the credential does not appear in the config repr."""
    assert "test-key" not in repr(config)


def test_config_requires_api_key():
    """Test empty credential is rejected."""
    with pytest.raises(ValueError):
        LanguageApiConfig(api_key="")


def test_entity_sentiment_picks_first_entity(client, session):
    """Test the first (top salience) entity is returned."""
    session.post.return_value = make_response(ENTITY_RESPONSE)

    result = client.fetch_entity_sentiment("Lunch at Google today")

    assert result.name == "Google"
    assert result.type == "ORGANIZATION"
    assert result.salience == 0.82
    assert result.entity_sentiment == Sentiment(magnitude=0.8, score=0.6)


def test_entity_sentiment_request_shape(client, session, config):
    """Test request body, credential and headers sent to the API."""
    session.post.return_value = make_response(ENTITY_RESPONSE)

    client.fetch_entity_sentiment("Lunch at Google today")

    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args[0] == config.entity_sentiment_url
    assert kwargs["params"] == {"key": "test-key"}
    assert kwargs["json"] == {
        "document": {
            "type": "PLAIN_TEXT",
            "language": "en",
            "content": "Lunch at Google today"
        },
        "encodingType": "UTF8"
    }
    assert kwargs["headers"]["Content-Type"] == "application/json; charset=utf-8"
    assert kwargs["timeout"] == 5.0


def test_entity_sentiment_no_entities(client, session):
    """Test an empty entity list fails with NoEntityFoundError."""
    session.post.return_value = make_response({"entities": [], "language": "en"})

    with pytest.raises(NoEntityFoundError):
        client.fetch_entity_sentiment("...")


def test_entity_sentiment_entities_field_absent(client, session):
    """Test a response without an entities field fails the same way."""
    session.post.return_value = make_response({"language": "en"})

    with pytest.raises(NoEntityFoundError):
        client.fetch_entity_sentiment("...")


def test_entity_missing_name_is_malformed(client, session):
    """Test an entity without its name is rejected."""
    session.post.return_value = make_response({
        "entities": [{"type": "OTHER", "salience": 1.0, "sentiment": {}}]
    })

    with pytest.raises(MalformedInputError):
        client.fetch_entity_sentiment("...")


def test_zero_valued_sentiment_fields_default(client, session):
    """Test fields dropped by the API for zero values decode as 0.0."""
    session.post.return_value = make_response({
        "entities": [
            {"name": "table", "type": "OTHER", "salience": 1.0, "sentiment": {}}
        ]
    })

    result = client.fetch_entity_sentiment("A table.")

    assert result.entity_sentiment == Sentiment(magnitude=0.0, score=0.0)


def test_absent_entity_sentiment_kept_as_none(client, session):
    """Test an entity with no sentiment object keeps None for aggregation."""
    session.post.return_value = make_response({
        "entities": [{"name": "table", "type": "OTHER", "salience": 1.0}]
    })

    result = client.fetch_entity_sentiment("A table.")

    assert result.entity_sentiment is None


def test_document_sentiment(client, session, config):
    """Test document sentiment is returned as sent by the API."""
    session.post.return_value = make_response(DOCUMENT_RESPONSE)

    result = client.fetch_document_sentiment("Lunch at Google today")

    assert result == Sentiment(magnitude=0.4, score=-0.2)
    assert session.post.call_args[0][0] == config.sentiment_url


def test_document_sentiment_absent(client, session):
    """Test missing documentSentiment yields None."""
    session.post.return_value = make_response({"language": "en"})

    assert client.fetch_document_sentiment("text") is None


@pytest.mark.parametrize("status_code", [400, 403, 429, 500, 503])
def test_non_success_status_raises_remote_service_error(client, session, status_code):
    """Test non-2xx responses carry the status code."""
    session.post.return_value = make_response({"error": {"code": status_code}}, status_code)

    with pytest.raises(RemoteServiceError) as exc_info:
        client.fetch_document_sentiment("text")

    assert exc_info.value.status_code == status_code
    assert exc_info.value.operation == "sentiment"


@pytest.mark.parametrize("cause", [
    requests.ConnectionError("connection refused"),
    requests.Timeout("read timed out"),
])
def test_transport_failure_raises_transport_error(client, session, cause):
    """Test network failures are wrapped with their cause."""
    session.post.side_effect = cause

    with pytest.raises(TransportError) as exc_info:
        client.fetch_entity_sentiment("text")

    assert exc_info.value.cause is cause
    assert exc_info.value.__cause__ is cause
    assert exc_info.value.operation == "entitySentiment"


def test_failures_logged_with_operation_name(client, session, caplog):
    """Test failures are logged before being re-raised."""
    session.post.return_value = make_response(None, 500)

    with caplog.at_level(logging.ERROR):
        with pytest.raises(RemoteServiceError):
            client.fetch_entity_sentiment("text")

    assert any(
        "entitySentiment()" in record.message and "500" in record.message
        for record in caplog.records
    )


def test_invalid_json_body_is_malformed(client, session):
    """Test an undecodable success body is rejected."""
    response = make_response(None)
    response.json.side_effect = ValueError("Expecting value")
    session.post.return_value = response

    with pytest.raises(MalformedInputError):
        client.fetch_document_sentiment("text")


def test_each_fetch_issues_one_request(client, session):
    """Test repeated identical text is not cached."""
    session.post.return_value = make_response(DOCUMENT_RESPONSE)

    client.fetch_document_sentiment("same text")
    client.fetch_document_sentiment("same text")

    assert session.post.call_count == 2


def test_zero_salience_field_defaults(client, session):
    """Test an entity whose salience was dropped for being zero decodes as 0.0."""
    session.post.return_value = make_response({
        "entities": [
            {"name": "thing", "type": "OTHER", "sentiment": {"magnitude": 0.3, "score": 0.1}}
        ]
    })

    result = client.fetch_entity_sentiment("A thing.")

    assert result.salience == 0.0
    assert result.entity_sentiment == Sentiment(magnitude=0.3, score=0.1)


def test_malformed_document_sentiment_logged(client, session, caplog):
    """Test a non-object documentSentiment is logged with the operation name."""
    session.post.return_value = make_response({"documentSentiment": [0.4, -0.2]})

    with caplog.at_level(logging.ERROR):
        with pytest.raises(MalformedInputError):
            client.fetch_document_sentiment("text")

    assert any(
        record.message.startswith("sentiment()") for record in caplog.records
    )


def test_malformed_entity_sentiment_logged(client, session, caplog):
    """Test a non-object entity sentiment is logged with the operation name."""
    session.post.return_value = make_response({
        "entities": [{"name": "x", "type": "OTHER", "salience": 1.0, "sentiment": "positive"}]
    })

    with caplog.at_level(logging.ERROR):
        with pytest.raises(MalformedInputError):
            client.fetch_entity_sentiment("text")

    assert any(
        record.message.startswith("entitySentiment()") for record in caplog.records
    )
