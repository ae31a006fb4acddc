"""Plaid Python Client

An asynchronous client for the Plaid API that provides:
- Typed request and response models for accounts, balances, transactions,
  identity, auth numbers, items, institutions and tokens
- Structured API errors, kept apart from transport and decoding failures
- Webhook payload parsing
"""

__version__ = "0.1.0"

from plaid_client.config.logging import setup_logging, get_logger
from plaid_client.auth.credentials import Credentials, Environment
from plaid_client.client.exceptions import (
    PlaidError,
    ConfigurationError,
    TransportError,
    InvalidParametersError,
    DecodingError,
    ApiError,
)
from plaid_client.plaid import Client
from plaid_client.webhooks.parser import parse_webhook

__all__ = [
    "Client",
    "Credentials",
    "Environment",
    "PlaidError",
    "ConfigurationError",
    "TransportError",
    "InvalidParametersError",
    "DecodingError",
    "ApiError",
    "parse_webhook",
    "setup_logging",
    "get_logger",
    "__version__",
]
