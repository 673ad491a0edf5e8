"""Exceptions raised while building a request, before anything is sent."""

from .base import TrueLayerException


class InvalidDateRange(TrueLayerException):
    """Raised when a transactions date filter is incomplete or inverted."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_DATE_RANGE",
        )


class MalformedURL(TrueLayerException):
    """Raised when a base URL cannot be parsed into scheme and host."""

    def __init__(self, url: str):
        super().__init__(
            message=f"Malformed base URL: {url!r}",
            code="MALFORMED_URL",
        )
        self.url = url
