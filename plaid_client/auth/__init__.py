"""Credential handling for the Plaid client."""

from plaid_client.auth.credentials import BASE_URLS, Credentials, Environment

__all__ = ["BASE_URLS", "Credentials", "Environment"]
