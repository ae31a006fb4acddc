"""Public entry point of the Plaid client."""

from typing import Optional, Union

from pydantic import SecretStr, ValidationError

from plaid_client.auth.credentials import Credentials, Environment
from plaid_client.client.exceptions import ConfigurationError
from plaid_client.client.http_client import HTTPClient
from plaid_client.config.logging import get_logger
from plaid_client.config.settings import Settings
from plaid_client.operations.account_operations import AccountOperations
from plaid_client.operations.item_operations import ItemOperations
from plaid_client.operations.sandbox_operations import SandboxOperations
from plaid_client.operations.token_operations import TokenOperations
from plaid_client.webhooks.parser import parse_webhook

logger = get_logger(__name__)


class Client:
    """Client for the Plaid API.

    Holds no mutable state once constructed, so one instance can serve any
    number of concurrent calls. Operations are grouped by area::

        client = Client.from_env()
        exchange = await client.tokens.exchange_public_token(public_token)
        accounts = await client.accounts.get_accounts(exchange.access_token)
    """

    parse_webhook = staticmethod(parse_webhook)

    def __init__(
        self,
        client_id: str,
        secret: Union[str, SecretStr],
        environment: Union[Environment, str] = Environment.SANDBOX,
        http_client: Optional[HTTPClient] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the client.

        Args:
            client_id: Plaid client identifier
            secret: Plaid secret for the environment
            environment: Target environment
            http_client: Transport to use; a new one is created if omitted
            timeout: Request timeout in seconds for a newly created transport

        Raises:
            ConfigurationError: If a credential is missing or the
                environment is unknown
        """
        try:
            self._credentials = Credentials(
                client_id=client_id,
                secret=secret,
                environment=Environment(environment),
            )
        except (ValueError, ValidationError) as e:
            raise ConfigurationError(f"Invalid Plaid configuration: {e}") from e

        self._http_client = http_client or HTTPClient(timeout=timeout)

        self.tokens = TokenOperations(self._http_client, self._credentials)
        self.accounts = AccountOperations(self._http_client, self._credentials)
        self.items = ItemOperations(self._http_client, self._credentials)
        self.sandbox = SandboxOperations(self._http_client, self._credentials)

        logger.debug(f"Plaid client initialized for {self.environment} environment")

    @classmethod
    def from_env(
        cls,
        http_client: Optional[HTTPClient] = None,
        timeout: Optional[float] = None,
    ) -> "Client":
        """Create a client from ``PLAID_CLIENT_ID``, ``PLAID_SECRET`` and ``PLAID_ENV``.

        Raises:
            ConfigurationError: If a variable is missing or invalid
        """
        try:
            settings = Settings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Plaid environment variables: {e}") from e

        return cls(
            client_id=settings.client_id,
            secret=settings.secret,
            environment=settings.env,
            http_client=http_client,
            timeout=timeout,
        )

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def client_id(self) -> str:
        return self._credentials.client_id

    @property
    def environment(self) -> Environment:
        return self._credentials.environment

    @property
    def http_client(self) -> HTTPClient:
        return self._http_client

    def __repr__(self) -> str:
        return f"Client(client_id={self.client_id!r}, environment={self.environment.value!r})"

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Release pooled connections."""
        await self._http_client.close()
