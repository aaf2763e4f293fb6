"""
Client configuration.

Built once at startup from config.settings and handed to LanguageClient.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class LanguageApiConfig:
    """Everything LanguageClient needs to reach the Natural Language API."""
    api_key: str = field(repr=False)  # Sent as the `key` query parameter
    base_url: str = "https://language.googleapis.com"
    api_version: str = "v1beta2"
    language: str = "en"
    document_type: str = "PLAIN_TEXT"
    encoding_type: str = "UTF8"
    timeout_seconds: Optional[float] = None

    def __post_init__(self):
        if not self.api_key:
            raise ValueError("api_key must be a non-empty Google API key")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(f"Invalid timeout: {self.timeout_seconds}. Must be positive")

    @property
    def entity_sentiment_url(self) -> str:
        return self._endpoint("analyzeEntitySentiment")

    @property
    def sentiment_url(self) -> str:
        return self._endpoint("analyzeSentiment")

    def _endpoint(self, method: str) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_version}/documents:{method}"

