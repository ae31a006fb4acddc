"""HTTP client module for Plaid API."""

from plaid_client.client.http_client import HTTPClient
from plaid_client.client.resolver import resolve_response
from plaid_client.client.exceptions import (
    PlaidError,
    ConfigurationError,
    TransportError,
    TimeoutError,
    ConnectionError,
    InvalidParametersError,
    DecodingError,
    ApiError,
    InvalidRequestError,
    InvalidInputError,
    InvalidResultError,
    ItemError,
    InstitutionError,
    RateLimitError,
    ServerError,
    create_api_error,
)

__all__ = [
    "HTTPClient",
    "resolve_response",
    "PlaidError",
    "ConfigurationError",
    "TransportError",
    "TimeoutError",
    "ConnectionError",
    "InvalidParametersError",
    "DecodingError",
    "ApiError",
    "InvalidRequestError",
    "InvalidInputError",
    "InvalidResultError",
    "ItemError",
    "InstitutionError",
    "RateLimitError",
    "ServerError",
    "create_api_error",
]
