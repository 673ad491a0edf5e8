"""httpx implementation of HttpTransport."""

from typing import Mapping

import httpx

from truelayer.core.config import settings
from truelayer.domain.exceptions import TransportError, TransportTimeoutError
from truelayer.domain.interfaces import HttpTransport, TransportResponse


class HttpxTransport(HttpTransport):
    """
    Sends requests with ``httpx.AsyncClient``.

    A shared client can be supplied to reuse connections; otherwise a client
    is opened for each request.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self._client = client
        self._timeout = timeout or settings.request_timeout

    @property
    def timeout(self) -> float:
        """Default timeout in seconds for requests without their own."""
        return self._timeout

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: bytes | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        request_timeout = timeout or self._timeout

        try:
            if self._client is not None:
                response = await self._client.request(
                    method,
                    url,
                    headers=dict(headers or {}),
                    content=body,
                    timeout=request_timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=request_timeout) as client:
                    response = await client.request(
                        method,
                        url,
                        headers=dict(headers or {}),
                        content=body,
                    )
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(url=url) from e
        except httpx.RequestError as e:
            raise TransportError(
                message=f"TrueLayer API request failed: {e}",
                url=url,
            ) from e

        return TransportResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        """Close the shared client, if one was supplied."""
        if self._client is not None:
            await self._client.aclose()
