"""Configuration for the Plaid client."""

from plaid_client.config.logging import get_logger, mask_sensitive_data, setup_logging
from plaid_client.config.settings import LoggingSettings, Settings

__all__ = ["LoggingSettings", "Settings", "get_logger", "mask_sensitive_data", "setup_logging"]
