from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from plaid_client.auth.credentials import Environment


class Settings(BaseSettings):
    """Client settings loaded from ``PLAID_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="PLAID_", case_sensitive=False, extra="ignore")

    # Plaid API credentials
    client_id: str = Field(..., min_length=1)
    secret: SecretStr = Field(...)
    env: Environment = Field(default=Environment.SANDBOX)

    @field_validator("secret")
    @classmethod
    def validate_secret(cls, v):
        """Reject an empty secret."""
        if not v.get_secret_value():
            raise ValueError("secret must not be empty")
        return v


class LoggingSettings(BaseSettings):
    """Logging settings, kept apart so a bad level never blocks credential loading.

    Pass ``LoggingSettings().log_level`` to ``setup_logging``.
    """

    model_config = SettingsConfigDict(env_prefix="PLAID_", case_sensitive=False, extra="ignore")

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()
