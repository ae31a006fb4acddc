"""Request pipeline shared by all Plaid operations."""

from typing import Any, Dict, Type, TypeVar

from pydantic import ValidationError

from plaid_client.auth.credentials import Credentials
from plaid_client.client.exceptions import InvalidParametersError
from plaid_client.client.http_client import HTTPClient
from plaid_client.client.resolver import ResponseT, resolve_response
from plaid_client.config.logging import get_logger
from plaid_client.models.requests import PlaidRequest

logger = get_logger(__name__)

RequestT = TypeVar("RequestT", bound=PlaidRequest)


class BaseOperations:
    """Build a request body, send it, and resolve the response."""

    def __init__(self, http_client: HTTPClient, credentials: Credentials):
        """Initialize operations.

        Args:
            http_client: HTTP client for API requests
            credentials: Credentials embedded in every request body
        """
        self.http_client = http_client
        self.credentials = credentials

    @staticmethod
    def _build_request(request_model: Type[RequestT], **fields: Any) -> RequestT:
        """Validate caller arguments into ``request_model``.

        Nested objects may be given as plain dicts.

        Raises:
            InvalidParametersError: If an argument is rejected
        """
        try:
            return request_model(**fields)
        except ValidationError as e:
            raise InvalidParametersError(f"Invalid {request_model.__name__}: {e}") from e

    def _build_body(self, request: PlaidRequest) -> Dict[str, Any]:
        """Merge credentials with the operation's fields."""
        body = self.credentials.to_request_fields()
        body.update(request.to_payload())
        return body

    async def _call(
        self,
        endpoint: str,
        request: PlaidRequest,
        response_model: Type[ResponseT],
    ) -> ResponseT:
        response = await self.http_client.post(
            self.credentials.environment.base_url,
            endpoint,
            json=self._build_body(request),
        )
        return resolve_response(response, response_model)
