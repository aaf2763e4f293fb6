"""
Configuration settings for tweetsent.

Centralized configuration for the client, the batch driver and the CLI.
Values are read once here; business modules receive them through their
constructors.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent

# Input
TWEETS_FILE = os.getenv("TWEETS_FILE", "./tweets.json")

# API Configuration
GOOGLE_KEY = os.getenv("GOOGLE_KEY") or os.getenv("GOOGLE_API_KEY", "")

# Google Natural Language REST API
LANGUAGE_API_BASE_URL = "https://language.googleapis.com"
LANGUAGE_API_VERSION = "v1beta2"
DOCUMENT_TYPE = "PLAIN_TEXT"
DOCUMENT_LANGUAGE = "en"
ENCODING_TYPE = "UTF8"
REQUEST_TIMEOUT_SECONDS = None  # None waits indefinitely

# Batch Driver
MAX_WORKERS = 4  # Tweet pipelines in flight at once
PRESERVE_INPUT_ORDER = True
CONTINUE_ON_TWEET_FAILURE = True

# Output
OUTPUT_INDENT = 4

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "tweetsent.log"


# Design Rationale and Trade-offs:
#
# 1. Environment variables for the key and input path
#    - A .env file is loaded first; real environment values take precedence
#    - GOOGLE_API_KEY is accepted when GOOGLE_KEY is unset
#
# 2. No request timeout by default
#    - A stalled call blocks its worker until the server closes the connection
#    - Trade-off: Set REQUEST_TIMEOUT_SECONDS or --timeout for unattended runs
#
# 3. Module constants read only by main.py
#    - Library modules receive values through constructors
