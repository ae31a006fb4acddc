from typing import Dict, Any, Optional
import httpx

from plaid_client import __version__
from plaid_client.config.logging import get_logger, mask_sensitive_data
from plaid_client.client.exceptions import ConnectionError, TimeoutError, TransportError

logger = get_logger(__name__)

# Never rendered, not even partially
SECRET_FIELDS = ("secret", "password")

# Rendered with only their ends visible
TOKEN_FIELDS = ("token", "authorization", "account_number", "iban")


class HTTPClient:
    """HTTP transport for the Plaid API.

    Issues exactly one request per call. Nothing is retried and no timeout is
    imposed unless one is passed in.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds, ``None`` for no timeout
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``
        """
        self.timeout = timeout

        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={
                "User-Agent": f"plaid-client-python/{__version__}",
                "Accept": "application/json",
                "Accept-Encoding": "gzip",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
        logger.debug("HTTP client closed")

    @staticmethod
    def _build_url(base_url: str, endpoint: str) -> str:
        """Build full URL from endpoint."""
        return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def _sanitize_for_logging(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Sanitize sensitive data for logging."""
        if not data:
            return {}

        sanitized = {}
        for key, value in data.items():
            key_lower = key.lower()
            if any(field in key_lower for field in SECRET_FIELDS):
                sanitized[key] = "[MASKED]"
            elif any(field in key_lower for field in TOKEN_FIELDS):
                if isinstance(value, str):
                    sanitized[key] = mask_sensitive_data(value)
                else:
                    sanitized[key] = "[MASKED]"
            elif isinstance(value, dict):
                sanitized[key] = self._sanitize_for_logging(value)
            else:
                sanitized[key] = value

        return sanitized

    async def post(
        self,
        base_url: str,
        endpoint: str,
        json: Dict[str, Any],
    ) -> httpx.Response:
        """Make POST request to API endpoint.

        Args:
            base_url: Base URL of the target environment
            endpoint: API endpoint path
            json: JSON body to send

        Returns:
            The complete HTTP response, whatever its status

        Raises:
            TimeoutError: When request times out
            ConnectionError: When connection, TLS or HTTP framing fails
            TransportError: When the response body cannot be read
        """
        url = self._build_url(base_url, endpoint)

        logger.debug(f"Making request: POST {url} {self._sanitize_for_logging(json)}")

        try:
            response = await self.client.post(url, json=json)
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request timed out: {e}") from e
        except httpx.TransportError as e:
            raise ConnectionError(f"Connection failed: {e}") from e
        except httpx.RequestError as e:
            # e.g. a gzip body that fails to decompress
            raise TransportError(f"Malformed HTTP response: {e}") from e

        logger.debug(
            f"POST {url} -> {response.status_code} "
            f"({len(response.content)} bytes)"
        )

        return response
