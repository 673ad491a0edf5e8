"""HTTP transport interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body of an HTTP response."""

    status_code: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class HttpTransport(ABC):
    """
    Abstract HTTP send capability used by every client call.

    Implementations only move bytes: authentication headers are supplied by
    the caller, and non-2xx statuses are returned, not raised.
    """

    @abstractmethod
    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: bytes | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        """
        Send a single HTTP request.

        Args:
            method: HTTP method, e.g. ``GET``
            url: Absolute request URL including the query string
            headers: Request headers
            body: Encoded request body
            timeout: Per-call timeout in seconds, None for the default

        Returns:
            The response status code and body

        Raises:
            TransportError: If no response was received
            TransportTimeoutError: If the request timed out
        """
        ...
