"""Decoding of API responses and webhook bodies into typed records."""

from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from truelayer.domain.entities import ErrorResponse, Results, WebhookRequest
from truelayer.domain.exceptions import (
    APIError,
    EmptyResult,
    MalformedErrorResponse,
    MalformedResponse,
    WebhookFailedError,
)
from truelayer.domain.interfaces import TransportResponse

ModelT = TypeVar("ModelT", bound=BaseModel)
RecordT = TypeVar("RecordT", bound=BaseModel)


def decode_response(response: TransportResponse, model: Type[ModelT]) -> ModelT:
    """
    Decode a response body into ``model``.

    Raises:
        APIError: If the status code is 300 or above
        MalformedErrorResponse: If an error body cannot be decoded
        MalformedResponse: If a success body does not match ``model``
    """
    if response.status_code >= 300:
        raise parse_error_response(response)

    try:
        return model.model_validate_json(response.body)
    except ValidationError as exc:
        raise MalformedResponse(
            message=f"Could not decode {model.__name__} response: {exc}",
            status_code=response.status_code,
        ) from exc


def parse_error_response(response: TransportResponse) -> APIError:
    """
    Decode an error body into an APIError, which is returned, not raised.

    Raises:
        MalformedErrorResponse: If the body is not a TrueLayer error
    """
    try:
        error = ErrorResponse.model_validate_json(response.body)
    except ValidationError as exc:
        raise MalformedErrorResponse(
            message=(
                f"Could not decode error response "
                f"(status {response.status_code}): {exc}"
            ),
            status_code=response.status_code,
        ) from exc

    return APIError.from_error_response(error, status_code=response.status_code)


def first_result(envelope: Results[RecordT], resource: str) -> RecordT:
    """Unwrap a singular fetch, raising EmptyResult on an empty list."""
    if not envelope.results:
        raise EmptyResult(resource)
    return envelope.results[0]


def decode_webhook_request(body: bytes | str) -> WebhookRequest:
    """
    Decode an async completion notification.

    Raises:
        MalformedResponse: If the body is not a webhook notification
        WebhookFailedError: If the notification reports a failed task
    """
    try:
        request = WebhookRequest.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedResponse(
            message=f"Could not decode webhook request: {exc}",
        ) from exc

    if request.failed:
        raise WebhookFailedError(request)

    return request
