"""HTTP plumbing: endpoints, request building, transport and decoding."""

from .endpoints import Endpoint
from .request_builder import (
    FORM_CONTENT_TYPE,
    build_date_range,
    build_form_body,
    build_query,
    build_url,
    format_rfc3339,
)
from .response_decoder import (
    decode_response,
    decode_webhook_request,
    first_result,
    parse_error_response,
)
from .transport import HttpxTransport

__all__ = [
    "Endpoint",
    "FORM_CONTENT_TYPE",
    "build_date_range",
    "build_form_body",
    "build_query",
    "build_url",
    "format_rfc3339",
    "decode_response",
    "decode_webhook_request",
    "first_result",
    "parse_error_response",
    "HttpxTransport",
]
