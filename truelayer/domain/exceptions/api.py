"""Exceptions raised from TrueLayer API responses."""

from typing import TYPE_CHECKING, Any, Dict

from .base import TrueLayerException

if TYPE_CHECKING:
    from truelayer.domain.entities import ErrorResponse, WebhookRequest


class APIError(TrueLayerException):
    """
    Raised when the API answers with a status >= 300.

    Attributes:
        error: The API error code, e.g. ``invalid_grant``
        description: Human-readable error description
        details: Optional field-level error details
        status_code: HTTP status of the response, None for webhook failures
    """

    def __init__(
        self,
        error: str,
        description: str = "",
        details: Dict[str, Any] | None = None,
        status_code: int | None = None,
    ):
        super().__init__(
            message=f"{error}: {description}",
            code="API_ERROR",
        )
        self.error = error
        self.description = description
        self.details = details or {}
        self.status_code = status_code

    @classmethod
    def from_error_response(
        cls,
        response: "ErrorResponse",
        status_code: int | None = None,
    ) -> "APIError":
        return cls(
            error=response.error,
            description=response.error_description,
            details=response.error_details,
            status_code=status_code,
        )


class WebhookFailedError(APIError):
    """Raised when an async webhook notification reports a failed task."""

    def __init__(self, request: "WebhookRequest"):
        super().__init__(
            error=request.error or "",
            description=request.error_description or "",
        )
        self.code = "ASYNC_TASK_FAILED"
        self.request = request


class MalformedResponse(TrueLayerException):
    """Raised when a success response body cannot be decoded."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="MALFORMED_RESPONSE",
        )
        self.status_code = status_code


class MalformedErrorResponse(MalformedResponse):
    """Raised when an error response body cannot be decoded."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message=message, status_code=status_code)
        self.code = "MALFORMED_ERROR_RESPONSE"


class EmptyResult(TrueLayerException):
    """Raised when a singular fetch returns an empty results list."""

    def __init__(self, resource: str):
        super().__init__(
            message=f"No {resource} returned in results",
            code="EMPTY_RESULT",
        )
        self.resource = resource
