"""
Google Natural Language API client.
"""

from tweetsent.client.config import LanguageApiConfig
from tweetsent.client.language_client import LanguageClient

__all__ = ["LanguageApiConfig", "LanguageClient"]
