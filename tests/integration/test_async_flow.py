"""
Integration tests for the async (webhook) flow.

These tests verify:
1. Async variants add async=true and webhook_uri to the request
2. Submissions decode into AsyncRequestResponse
3. Deferred payloads are fetched from the results endpoint
4. Webhook bodies decode, and failed tasks raise the API error type
"""

import json
from datetime import datetime, timezone
from urllib.parse import parse_qsl, urlsplit

import pytest
from prometheus_client import REGISTRY

from truelayer.domain.entities import (
    Account,
    AccountTransaction,
    AsyncRequestResponse,
    WebhookRequest,
)
from truelayer.domain.exceptions import (
    APIError,
    InvalidDateRange,
    MalformedResponse,
    WebhookFailedError,
)
from truelayer.infrastructure.clients import TrueLayerClient
from tests.integration.conftest import StubTransport, json_response, results_response
from tests.payloads import (
    ACCOUNT_PAYLOAD,
    ASYNC_RESPONSE_PAYLOAD,
    ERROR_PAYLOAD,
    TRANSACTION_PAYLOAD,
    WEBHOOK_FAILED_PAYLOAD,
    WEBHOOK_SUCCEEDED_PAYLOAD,
)

API = "https://api.truelayer-sandbox.com"
TOKEN = "user-access-token"
WEBHOOK_URI = "https://example.com/webhook"


# =============================================================================
# Submissions
# =============================================================================

class TestSubmission:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, args, path",
        [
            ("get_accounts_via_webhook", (), "/data/v1/accounts"),
            ("get_account_via_webhook", ("acc-1",), "/data/v1/accounts/acc-1"),
            (
                "get_account_balance_via_webhook",
                ("acc-1",),
                "/data/v1/accounts/acc-1/balance",
            ),
            (
                "get_account_transactions_via_webhook",
                ("acc-1",),
                "/data/v1/accounts/acc-1/transactions",
            ),
            (
                "get_account_pending_transactions_via_webhook",
                ("acc-1",),
                "/data/v1/accounts/acc-1/transactions/pending",
            ),
            (
                "get_account_standing_orders_via_webhook",
                ("acc-1",),
                "/data/v1/accounts/acc-1/standing_orders",
            ),
            (
                "get_account_direct_debits_via_webhook",
                ("acc-1",),
                "/data/v1/accounts/acc-1/direct_debits",
            ),
        ],
    )
    async def test_async_variants(
        self,
        client: TrueLayerClient,
        stub_transport: StubTransport,
        method,
        args,
        path,
    ):
        stub_transport.queue(json_response(202, ASYNC_RESPONSE_PAYLOAD))

        submitted = await getattr(client, method)(TOKEN, *args, WEBHOOK_URI)

        assert isinstance(submitted, AsyncRequestResponse)
        assert submitted.task_id == "a1b2c3d4"
        assert submitted.status == "Queued"

        request = stub_transport.last_request
        parts = urlsplit(request.url)
        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == f"{API}{path}"
        assert parts.query == "async=true&webhook_uri=https%3A%2F%2Fexample.com%2Fwebhook"
        assert request.headers == {"Authorization": f"Bearer {TOKEN}"}

    @pytest.mark.asyncio
    async def test_transactions_with_date_range(
        self, client: TrueLayerClient, stub_transport: StubTransport
    ):
        stub_transport.queue(json_response(202, ASYNC_RESPONSE_PAYLOAD))

        await client.get_account_transactions_via_webhook(
            TOKEN,
            "acc-1",
            WEBHOOK_URI,
            from_date=datetime(2023, 1, 1, tzinfo=timezone.utc),
            to_date=datetime(2023, 1, 31, tzinfo=timezone.utc),
        )

        params = parse_qsl(urlsplit(stub_transport.last_request.url).query)
        assert [key for key, _ in params] == ["async", "from", "to", "webhook_uri"]
        assert dict(params)["from"] == "2023-01-01T00:00:00Z"

    @pytest.mark.asyncio
    async def test_one_sided_range_fails_before_request(
        self, client: TrueLayerClient, stub_transport: StubTransport
    ):
        with pytest.raises(InvalidDateRange):
            await client.get_account_transactions_via_webhook(
                TOKEN,
                "acc-1",
                WEBHOOK_URI,
                to_date=datetime(2023, 1, 31, tzinfo=timezone.utc),
            )

        assert stub_transport.requests == []

    @pytest.mark.asyncio
    async def test_submission_rejected(
        self, client: TrueLayerClient, stub_transport: StubTransport
    ):
        stub_transport.queue(json_response(400, ERROR_PAYLOAD))

        with pytest.raises(APIError):
            await client.get_accounts_via_webhook(TOKEN, WEBHOOK_URI)


# =============================================================================
# Results
# =============================================================================

class TestResults:
    @pytest.mark.asyncio
    async def test_fetch_results_by_task(
        self, client: TrueLayerClient, stub_transport: StubTransport
    ):
        stub_transport.queue(results_response(ACCOUNT_PAYLOAD))

        accounts = await client.get_results(TOKEN, "a1b2c3d4", Account)

        assert isinstance(accounts[0], Account)
        assert stub_transport.last_request.url == f"{API}/data/v1/results/a1b2c3d4"

    @pytest.mark.asyncio
    async def test_full_flow(self, client: TrueLayerClient, stub_transport: StubTransport):
        stub_transport.queue(json_response(202, ASYNC_RESPONSE_PAYLOAD))
        stub_transport.queue(results_response(TRANSACTION_PAYLOAD))

        submitted = await client.get_account_transactions_via_webhook(
            TOKEN, "acc-1", WEBHOOK_URI
        )
        notification = client.handle_async_webhook_request_body(
            json.dumps(WEBHOOK_SUCCEEDED_PAYLOAD).encode()
        )
        assert notification.task_id == submitted.task_id

        transactions = await client.get_results(
            TOKEN, notification.task_id, AccountTransaction
        )

        assert transactions[0].merchant_name == "Google play"
        assert len(stub_transport.requests) == 2


# =============================================================================
# Webhook Handling
# =============================================================================

class TestWebhookHandling:
    def test_succeeded(self, client: TrueLayerClient):
        request = client.handle_async_webhook_request_body(
            json.dumps(WEBHOOK_SUCCEEDED_PAYLOAD)
        )

        assert isinstance(request, WebhookRequest)
        assert request.results_uri == WEBHOOK_SUCCEEDED_PAYLOAD["results_uri"]

    def test_failed_raises_api_error(self, client: TrueLayerClient):
        with pytest.raises(APIError) as exc_info:
            client.handle_async_webhook_request_body(json.dumps(WEBHOOK_FAILED_PAYLOAD))

        error = exc_info.value
        assert isinstance(error, WebhookFailedError)
        assert error.error == "provider_error"
        assert error.description == "The provider service is currently unavailable"
        assert error.status_code is None
        assert error.request.status == "Failed"

    def test_malformed_body(self, client: TrueLayerClient):
        with pytest.raises(MalformedResponse):
            client.handle_async_webhook_request_body(b"{}")

    def test_unknown_statuses_share_one_metric_label(self, client: TrueLayerClient):
        def webhook_count(status: str) -> float:
            return (
                REGISTRY.get_sample_value(
                    "truelayer_webhooks_received_total", {"status": status}
                )
                or 0.0
            )

        before = webhook_count("other")

        for i in range(5):
            body = dict(WEBHOOK_SUCCEEDED_PAYLOAD, status=f"junk{i}")
            client.handle_async_webhook_request_body(json.dumps(body))

        assert webhook_count("other") == before + 5
        labels = {
            sample.labels["status"]
            for metric in REGISTRY.collect()
            if metric.name == "truelayer_webhooks_received"
            for sample in metric.samples
        }
        assert not any(label.startswith("junk") for label in labels)

    def test_known_status_keeps_its_label(self, client: TrueLayerClient):
        before = (
            REGISTRY.get_sample_value(
                "truelayer_webhooks_received_total", {"status": "Succeeded"}
            )
            or 0.0
        )

        client.handle_async_webhook_request_body(json.dumps(WEBHOOK_SUCCEEDED_PAYLOAD))

        after = REGISTRY.get_sample_value(
            "truelayer_webhooks_received_total", {"status": "Succeeded"}
        )
        assert after == before + 1
