"""
tweetsent - Tweet sentiment analysis over the Google Natural Language API.

Pipeline stages:
- Tweet Source Reader
- Remote Sentiment Client (entity sentiment + document sentiment)
- Aggregator
- Batch Driver
"""

__version__ = "1.0.0"
