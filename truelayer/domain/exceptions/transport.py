"""Network-level exceptions."""

from .base import TrueLayerException


class TransportError(TrueLayerException):
    """Raised when a request could not be sent or no response was received."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(
            message=message,
            code="TRANSPORT_ERROR",
        )
        self.url = url


class TransportTimeoutError(TransportError):
    """Raised when a request times out."""

    def __init__(self, url: str | None = None):
        super().__init__(
            message="TrueLayer API request timed out",
            url=url,
        )
        self.code = "TRANSPORT_TIMEOUT"
