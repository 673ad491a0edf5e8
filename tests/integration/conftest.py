"""
Fixtures for integration tests.

Provides:
- Stub transport returning canned responses and recording requests
- TrueLayerClient wired to the stub
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

import pytest

from truelayer.domain.interfaces import HttpTransport, TransportResponse
from truelayer.infrastructure.clients import TrueLayerClient


# =============================================================================
# Stub Transport
# =============================================================================

@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float | None = None


def json_response(status_code: int, payload: Any) -> TransportResponse:
    """Build a canned response with a JSON body."""
    return TransportResponse(
        status_code=status_code,
        body=json.dumps(payload).encode("utf-8"),
        headers={"content-type": "application/json"},
    )


def results_response(*records: Any) -> TransportResponse:
    """Build a 200 response wrapping records in a results envelope."""
    return json_response(200, {"results": list(records)})


class StubTransport(HttpTransport):
    """
    HttpTransport returning queued responses in order.

    Set ``error`` to raise it from every send instead.
    """

    def __init__(self, *responses: TransportResponse):
        self.responses: List[TransportResponse] = list(responses)
        self.requests: List[RecordedRequest] = []
        self.error: Exception | None = None

    def queue(self, response: TransportResponse) -> None:
        self.responses.append(response)

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: bytes | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        self.requests.append(
            RecordedRequest(
                method=method,
                url=url,
                headers=dict(headers or {}),
                body=body,
                timeout=timeout,
            )
        )
        if self.error is not None:
            raise self.error
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        return self.responses.pop(0)

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest.fixture
def stub_transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def client(stub_transport: StubTransport) -> TrueLayerClient:
    """Sandbox client using the stub transport."""
    return TrueLayerClient(
        client_id="abc",
        client_secret="secret",
        sandbox=True,
        transport=stub_transport,
    )
