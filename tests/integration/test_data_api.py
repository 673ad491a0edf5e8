"""
Integration tests for the data API endpoints.

These tests verify:
1. Each endpoint hits the documented path with a bearer token
2. Responses unwrap to typed records
3. Date range filters, and their validation before any request
4. Failure propagation: APIError, TransportError, MalformedResponse, EmptyResult
"""

from datetime import datetime, timezone

import pytest

from truelayer.domain.entities import (
    Account,
    AccountBalance,
    AccountDirectDebit,
    AccountStandingOrder,
    AccountTransaction,
)
from truelayer.domain.exceptions import (
    APIError,
    EmptyResult,
    InvalidDateRange,
    MalformedResponse,
    MalformedURL,
    TransportError,
    TransportTimeoutError,
)
from truelayer.domain.interfaces import TransportResponse
from truelayer.infrastructure.clients import TrueLayerClient
from tests.integration.conftest import StubTransport, json_response, results_response
from tests.payloads import (
    ACCOUNT_PAYLOAD,
    BALANCE_PAYLOAD,
    DIRECT_DEBIT_PAYLOAD,
    ERROR_PAYLOAD,
    STANDING_ORDER_PAYLOAD,
    TRANSACTION_PAYLOAD,
)

API = "https://api.truelayer-sandbox.com"
TOKEN = "user-access-token"


# =============================================================================
# Endpoints
# =============================================================================

class TestAccounts:
    @pytest.mark.asyncio
    async def test_get_accounts(self, client: TrueLayerClient, stub_transport: StubTransport):
        stub_transport.queue(results_response(ACCOUNT_PAYLOAD, ACCOUNT_PAYLOAD))

        accounts = await client.get_accounts(TOKEN)

        assert len(accounts) == 2
        assert all(isinstance(account, Account) for account in accounts)

        request = stub_transport.last_request
        assert request.method == "GET"
        assert request.url == f"{API}/data/v1/accounts"
        assert request.headers == {"Authorization": f"Bearer {TOKEN}"}
        assert request.body is None

    @pytest.mark.asyncio
    async def test_get_account(self, client: TrueLayerClient, stub_transport: StubTransport):
        stub_transport.queue(results_response(ACCOUNT_PAYLOAD))

        account = await client.get_account(TOKEN, "acc-1")

        assert account.account_id == ACCOUNT_PAYLOAD["account_id"]
        assert stub_transport.last_request.url == f"{API}/data/v1/accounts/acc-1"

    @pytest.mark.asyncio
    async def test_get_account_empty_results(
        self, client: TrueLayerClient, stub_transport: StubTransport
    ):
        stub_transport.queue(results_response())

        with pytest.raises(EmptyResult):
            await client.get_account(TOKEN, "acc-1")

    @pytest.mark.asyncio
    async def test_production_host(self):
        stub = StubTransport(results_response())
        client = TrueLayerClient("abc", "secret", sandbox=False, transport=stub)

        assert await client.get_accounts(TOKEN) == []
        assert stub.last_request.url == "https://api.truelayer.com/data/v1/accounts"


class TestBalance:
    @pytest.mark.asyncio
    async def test_get_account_balance(
        self, client: TrueLayerClient, stub_transport: StubTransport
    ):
        stub_transport.queue(results_response(BALANCE_PAYLOAD))

        balance = await client.get_account_balance(TOKEN, "acc-1")

        assert isinstance(balance, AccountBalance)
        assert balance.currency == "GBP"
        assert stub_transport.last_request.url == f"{API}/data/v1/accounts/acc-1/balance"

    @pytest.mark.asyncio
    async def test_empty_balance(self, client: TrueLayerClient, stub_transport: StubTransport):
        stub_transport.queue(results_response())

        with pytest.raises(EmptyResult) as exc_info:
            await client.get_account_balance(TOKEN, "acc-1")

        assert exc_info.value.resource == "balance"


class TestTransactions:
    @pytest.mark.asyncio
    async def test_get_account_transactions(
        self, client: TrueLayerClient, stub_transport: StubTransport
    ):
        stub_transport.queue(results_response(TRANSACTION_PAYLOAD))

        transactions = await client.get_account_transactions(TOKEN, "acc-1")

        assert len(transactions) == 1
        assert isinstance(transactions[0], AccountTransaction)
        assert stub_transport.last_request.url == f"{API}/data/v1/accounts/acc-1/transactions"

    @pytest.mark.asyncio
    async def test_date_range_filter(self, client: TrueLayerClient, stub_transport: StubTransport):
        stub_transport.queue(results_response(TRANSACTION_PAYLOAD))

        await client.get_account_transactions(
            TOKEN,
            "acc-1",
            from_date=datetime(2023, 1, 1, tzinfo=timezone.utc),
            to_date=datetime(2023, 2, 1, tzinfo=timezone.utc),
        )

        assert stub_transport.last_request.url == (
            f"{API}/data/v1/accounts/acc-1/transactions"
            "?from=2023-01-01T00%3A00%3A00Z&to=2023-02-01T00%3A00%3A00Z"
        )

    @pytest.mark.asyncio
    async def test_one_sided_range_fails_before_request(
        self, client: TrueLayerClient, stub_transport: StubTransport
    ):
        with pytest.raises(InvalidDateRange):
            await client.get_account_transactions(
                TOKEN, "acc-1", from_date=datetime(2023, 1, 1, tzinfo=timezone.utc)
            )

        with pytest.raises(InvalidDateRange):
            await client.get_account_pending_transactions(
                TOKEN, "acc-1", to_date=datetime(2023, 1, 1, tzinfo=timezone.utc)
            )

        assert stub_transport.requests == []

    @pytest.mark.asyncio
    async def test_pending_transactions_path(
        self, client: TrueLayerClient, stub_transport: StubTransport
    ):
        stub_transport.queue(results_response(TRANSACTION_PAYLOAD))

        transactions = await client.get_account_pending_transactions(TOKEN, "acc-1")

        assert transactions[0].transaction_id == TRANSACTION_PAYLOAD["transaction_id"]
        assert stub_transport.last_request.url == (
            f"{API}/data/v1/accounts/acc-1/transactions/pending"
        )


class TestStandingOrdersAndDirectDebits:
    @pytest.mark.asyncio
    async def test_get_account_standing_orders(
        self, client: TrueLayerClient, stub_transport: StubTransport
    ):
        stub_transport.queue(results_response(STANDING_ORDER_PAYLOAD))

        orders = await client.get_account_standing_orders(TOKEN, "acc-1")

        assert isinstance(orders[0], AccountStandingOrder)
        assert orders[0].payee == "Landlord Ltd"
        assert stub_transport.last_request.url == (
            f"{API}/data/v1/accounts/acc-1/standing_orders"
        )

    @pytest.mark.asyncio
    async def test_get_account_direct_debits(
        self, client: TrueLayerClient, stub_transport: StubTransport
    ):
        stub_transport.queue(results_response(DIRECT_DEBIT_PAYLOAD))

        debits = await client.get_account_direct_debits(TOKEN, "acc-1")

        assert isinstance(debits[0], AccountDirectDebit)
        assert debits[0].name == "ACME Energy"
        assert stub_transport.last_request.url == f"{API}/data/v1/accounts/acc-1/direct_debits"


# =============================================================================
# Failures
# =============================================================================

class TestFailures:
    @pytest.mark.asyncio
    async def test_api_error(self, client: TrueLayerClient, stub_transport: StubTransport):
        stub_transport.queue(json_response(401, ERROR_PAYLOAD))

        with pytest.raises(APIError) as exc_info:
            await client.get_accounts(TOKEN)

        assert exc_info.value.status_code == 401
        assert exc_info.value.description == "The code has expired"

    @pytest.mark.asyncio
    async def test_transport_error_propagates(
        self, client: TrueLayerClient, stub_transport: StubTransport
    ):
        failure = TransportError("connection refused", url=f"{API}/data/v1/accounts")
        stub_transport.error = failure

        with pytest.raises(TransportError) as exc_info:
            await client.get_accounts(TOKEN)

        assert exc_info.value is failure

    @pytest.mark.asyncio
    async def test_timeout_propagates(self, client: TrueLayerClient, stub_transport: StubTransport):
        stub_transport.error = TransportTimeoutError()

        with pytest.raises(TransportTimeoutError):
            await client.get_account_balance(TOKEN, "acc-1", timeout=0.5)

        assert stub_transport.last_request.timeout == 0.5

    @pytest.mark.asyncio
    async def test_malformed_body(self, client: TrueLayerClient, stub_transport: StubTransport):
        stub_transport.queue(TransportResponse(status_code=200, body=b"{\"results\": 1}"))

        with pytest.raises(MalformedResponse):
            await client.get_account_direct_debits(TOKEN, "acc-1")

    @pytest.mark.asyncio
    async def test_bad_port_in_api_host(self, stub_transport: StubTransport):
        client = TrueLayerClient(
            "abc",
            "secret",
            transport=stub_transport,
            api_base_url="https://api.truelayer.com:notaport",
        )

        with pytest.raises(MalformedURL):
            await client.get_accounts(TOKEN)

        assert stub_transport.requests == []
