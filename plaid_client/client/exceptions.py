"""Custom exceptions for the Plaid client."""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from plaid_client.models.common import ErrorResponse


class PlaidError(Exception):
    """Base exception for all Plaid client errors."""
    pass


class ConfigurationError(PlaidError):
    """Raised when credentials or the environment are missing or invalid."""
    pass


class TransportError(PlaidError):
    """Raised when the HTTP exchange itself fails."""
    pass


class TimeoutError(TransportError):
    """Raised when request times out."""
    pass


class ConnectionError(TransportError):
    """Raised when connection fails."""
    pass


class InvalidParametersError(PlaidError):
    """Raised when arguments to an operation fail validation before sending."""
    pass


class DecodingError(PlaidError):
    """Raised when a body cannot be read as the expected schema.

    ``status_code`` and ``body`` are the raw HTTP status and response text,
    kept for diagnosing upstream incompatibilities.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ApiError(PlaidError):
    """Structured error returned by the Plaid API."""

    def __init__(self, status_code: int, error: "ErrorResponse"):
        super().__init__(f"{error.error_type}: {error.error_code}: {error.error_message}")
        self.status_code = status_code
        self.error = error

    @property
    def error_type(self) -> str:
        return str(self.error.error_type)

    @property
    def error_code(self) -> str:
        return self.error.error_code

    @property
    def error_message(self) -> str:
        return self.error.error_message

    @property
    def display_message(self) -> Optional[str]:
        return self.error.display_message

    @property
    def request_id(self) -> Optional[str]:
        return self.error.request_id


class InvalidRequestError(ApiError):
    """Raised for malformed requests (``INVALID_REQUEST``)."""
    pass


class InvalidInputError(ApiError):
    """Raised when supplied values are incorrect (``INVALID_INPUT``)."""
    pass


class InvalidResultError(ApiError):
    """Raised when the output would be unusable (``INVALID_RESULT``)."""
    pass


class ItemError(ApiError):
    """Raised when an Item is invalid or unsupported (``ITEM_ERROR``)."""
    pass


class InstitutionError(ApiError):
    """Raised for institution-side failures (``INSTITUTION_ERROR``)."""
    pass


class RateLimitError(ApiError):
    """Raised when rate limit is exceeded (``RATE_LIMIT_EXCEEDED``)."""
    pass


class ServerError(ApiError):
    """Raised for Plaid-side failures (``API_ERROR``)."""
    pass


def create_api_error(status_code: int, error: "ErrorResponse") -> ApiError:
    """Create appropriate API error based on the error type."""

    error_classes = {
        "INVALID_REQUEST": InvalidRequestError,
        "INVALID_INPUT": InvalidInputError,
        "INVALID_RESULT": InvalidResultError,
        "ITEM_ERROR": ItemError,
        "INSTITUTION_ERROR": InstitutionError,
        "RATE_LIMIT_EXCEEDED": RateLimitError,
        "API_ERROR": ServerError,
    }

    error_class = error_classes.get(str(error.error_type), ApiError)
    return error_class(status_code=status_code, error=error)
