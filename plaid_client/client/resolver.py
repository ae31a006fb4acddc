"""Translation of raw HTTP responses into typed results or errors."""

from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from plaid_client.client.exceptions import DecodingError, create_api_error
from plaid_client.models.common import ErrorResponse

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def _parse_error(body: bytes) -> Optional[ErrorResponse]:
    try:
        return ErrorResponse.model_validate_json(body)
    except ValidationError:
        return None


def resolve_response(response: httpx.Response, response_model: Type[ResponseT]) -> ResponseT:
    """Resolve a response into ``response_model`` or raise.

    A success status is parsed as ``response_model``. Any other status, or a
    success body that is a Plaid error object rather than ``response_model``,
    is raised as the matching ``ApiError``. When neither parse succeeds, a
    ``DecodingError`` carrying the raw status and body is raised instead.

    Raises:
        ApiError: The API returned a well-formed error payload
        DecodingError: The body does not match the expected schema
    """
    body = response.content

    if response.is_success:
        try:
            return response_model.model_validate_json(body)
        except ValidationError as e:
            error = _parse_error(body)
            if error is not None:
                raise create_api_error(response.status_code, error) from e
            raise DecodingError(
                f"Response body does not match {response_model.__name__}: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    error = _parse_error(body)
    if error is None:
        raise DecodingError(
            f"HTTP {response.status_code} with unreadable error body",
            status_code=response.status_code,
            body=response.text,
        )

    raise create_api_error(response.status_code, error)
