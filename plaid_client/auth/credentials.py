"""Client credentials and API environments."""

from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class Environment(str, Enum):
    """Plaid API environment.

    ``sandbox`` and ``development`` are testing environments; ``production``
    is live, billed access.
    """

    SANDBOX = "sandbox"
    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None

    @property
    def base_url(self) -> str:
        """Base URL of the environment."""
        return BASE_URLS[self]

    def __str__(self) -> str:
        return self.value


BASE_URLS: Dict[Environment, str] = {
    Environment.SANDBOX: "https://sandbox.plaid.com",
    Environment.DEVELOPMENT: "https://development.plaid.com",
    Environment.PRODUCTION: "https://production.plaid.com",
}


class Credentials(BaseModel):
    """Credentials identifying the calling application."""

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(..., min_length=1, description="Plaid client identifier")
    secret: SecretStr = Field(..., description="Plaid API secret")
    environment: Environment = Field(Environment.SANDBOX, description="Target API environment")

    @field_validator("secret")
    @classmethod
    def validate_secret(cls, v):
        """Reject an empty secret."""
        if not v.get_secret_value():
            raise ValueError("secret must not be empty")
        return v

    def to_request_fields(self) -> Dict[str, str]:
        """Fields every request body carries. The only place the secret is exposed."""
        return {
            "client_id": self.client_id,
            "secret": self.secret.get_secret_value(),
        }
