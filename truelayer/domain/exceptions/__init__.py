"""Library exceptions."""

from .base import TrueLayerException
from .api import (
    APIError,
    EmptyResult,
    MalformedErrorResponse,
    MalformedResponse,
    WebhookFailedError,
)
from .request import InvalidDateRange, MalformedURL
from .transport import TransportError, TransportTimeoutError

__all__ = [
    "TrueLayerException",
    "APIError",
    "EmptyResult",
    "MalformedErrorResponse",
    "MalformedResponse",
    "WebhookFailedError",
    "InvalidDateRange",
    "MalformedURL",
    "TransportError",
    "TransportTimeoutError",
]
