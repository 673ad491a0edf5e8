"""Client for the TrueLayer auth and data APIs."""

from datetime import datetime
from enum import Enum
from typing import Iterable, List, Mapping, Type, TypeVar

import structlog
from pydantic import BaseModel

from truelayer.core.config import Settings, settings
from truelayer.core.environment import select_environment
from truelayer.core.metrics import (
    record_api_failure,
    record_api_response,
    record_webhook,
    track_api_latency,
)
from truelayer.domain.entities import (
    AccessToken,
    Account,
    AccountBalance,
    AccountDirectDebit,
    AccountStandingOrder,
    AccountTransaction,
    AsyncRequestResponse,
    ClientCredentials,
    Results,
    TaskStatus,
    WebhookRequest,
)
from truelayer.domain.exceptions import (
    APIError,
    MalformedResponse,
    TransportError,
    TransportTimeoutError,
    WebhookFailedError,
)
from truelayer.domain.interfaces import HttpTransport, TransportResponse
from truelayer.infrastructure.http import (
    FORM_CONTENT_TYPE,
    Endpoint,
    HttpxTransport,
    build_date_range,
    build_form_body,
    build_url,
    decode_response,
    decode_webhook_request,
    first_result,
)

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
RecordT = TypeVar("RecordT", bound=BaseModel)


def _join(values: Iterable[str | Enum]) -> str:
    return " ".join(v.value if isinstance(v, Enum) else str(v) for v in values)


def _status_label(status: str) -> str:
    # Metric labels are limited to known task statuses.
    try:
        return TaskStatus(status).value
    except ValueError:
        return "other"


class TrueLayerClient:
    """
    Typed client for the TrueLayer API.

    Holds only the immutable credentials, the selected hosts and the
    transport, so one instance can serve concurrent calls. Nothing is cached
    or retried: access tokens are owned by the caller, and every failure is
    raised to the caller as a TrueLayerException subclass.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        sandbox: bool = False,
        transport: HttpTransport | None = None,
        auth_base_url: str | None = None,
        api_base_url: str | None = None,
    ):
        self._credentials = ClientCredentials(
            client_id=client_id,
            client_secret=client_secret,
            sandbox=sandbox,
        )
        environment = select_environment(sandbox)
        self._auth_base_url = auth_base_url or environment.auth_base_url
        self._api_base_url = api_base_url or environment.api_base_url
        self._transport = transport or HttpxTransport()

    @classmethod
    def from_settings(
        cls,
        config: Settings | None = None,
        transport: HttpTransport | None = None,
    ) -> "TrueLayerClient":
        """Build a client from environment configuration."""
        config = config or settings
        return cls(
            client_id=config.client_id,
            client_secret=config.client_secret,
            sandbox=config.sandbox,
            transport=transport or HttpxTransport(timeout=config.request_timeout),
            auth_base_url=config.auth_base_url,
            api_base_url=config.api_base_url,
        )

    @property
    def credentials(self) -> ClientCredentials:
        return self._credentials

    @property
    def auth_base_url(self) -> str:
        return self._auth_base_url

    @property
    def api_base_url(self) -> str:
        return self._api_base_url

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    # =========================================================================
    # Authentication
    # =========================================================================

    def get_authentication_link(
        self,
        providers: Iterable[str],
        permissions: Iterable[str],
        redirect_uri: str,
        post_code: bool = False,
    ) -> str:
        """
        Build the link a user follows to grant access at their providers.

        No request is made. The client secret is never included.

        Args:
            providers: Allowed provider identifiers
            permissions: Requested scopes
            redirect_uri: Where the auth server sends the code
            post_code: Have the code submitted with ``POST`` instead of ``GET``

        Raises:
            MalformedURL: If the auth base URL cannot be parsed
        """
        params = self._credentials.as_form_fields(with_secret=False)
        params.update(
            response_type="code",
            scope=_join(permissions),
            providers=_join(providers),
            redirect_uri=str(redirect_uri),
        )

        if post_code:
            params["response_mode"] = "form_post"

        return build_url(self._auth_base_url, Endpoint.AUTH_LINK.value, query=params)

    async def get_access_token(
        self,
        code: str,
        redirect_uri: str,
        timeout: float | None = None,
    ) -> AccessToken:
        """
        Exchange an authorization code for an access token.

        Raises:
            APIError: If the token endpoint rejects the code
        """
        fields = self._credentials.as_form_fields(with_secret=True)
        fields.update(
            grant_type="authorization_code",
            redirect_uri=str(redirect_uri),
            code=code,
        )
        return await self._request_token(fields, timeout)

    async def refresh_access_token(
        self,
        refresh_token: str,
        timeout: float | None = None,
    ) -> AccessToken:
        """
        Exchange a refresh token for a new access token.

        Raises:
            APIError: If the token endpoint rejects the refresh token
        """
        fields = self._credentials.as_form_fields(with_secret=True)
        fields.update(
            grant_type="refresh_token",
            refresh_token=refresh_token,
        )
        return await self._request_token(fields, timeout)

    async def _request_token(
        self,
        fields: Mapping[str, str],
        timeout: float | None,
    ) -> AccessToken:
        url = build_url(self._auth_base_url, Endpoint.TOKEN.value)
        response = await self._send(
            Endpoint.TOKEN,
            "POST",
            url,
            headers={"Content-Type": FORM_CONTENT_TYPE},
            body=build_form_body(fields),
            timeout=timeout,
        )
        return self._decode(Endpoint.TOKEN, response, AccessToken)

    # =========================================================================
    # Data API
    # =========================================================================

    async def get_accounts(
        self,
        access_token: str,
        timeout: float | None = None,
    ) -> List[Account]:
        """Retrieve every account the access token grants access to."""
        envelope = await self._get_results(
            Endpoint.ACCOUNTS, Account, access_token, timeout=timeout
        )
        return envelope.results

    async def get_account(
        self,
        access_token: str,
        account_id: str,
        timeout: float | None = None,
    ) -> Account:
        """
        Retrieve a single account.

        Raises:
            EmptyResult: If the API returns no account
        """
        envelope = await self._get_results(
            Endpoint.ACCOUNT, Account, access_token, account_id, timeout=timeout
        )
        return first_result(envelope, "account")

    async def get_account_balance(
        self,
        access_token: str,
        account_id: str,
        timeout: float | None = None,
    ) -> AccountBalance:
        """
        Retrieve an account's balance.

        Raises:
            EmptyResult: If the API returns no balance
        """
        envelope = await self._get_results(
            Endpoint.ACCOUNT_BALANCE,
            AccountBalance,
            access_token,
            account_id,
            timeout=timeout,
        )
        return first_result(envelope, "balance")

    async def get_account_transactions(
        self,
        access_token: str,
        account_id: str,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        timeout: float | None = None,
    ) -> List[AccountTransaction]:
        """
        Retrieve an account's settled transactions.

        Both ``from_date`` and ``to_date`` must be given to filter by date.

        Raises:
            InvalidDateRange: If only one bound is given, before any request
        """
        params = build_date_range(from_date, to_date)
        envelope = await self._get_results(
            Endpoint.ACCOUNT_TRANSACTIONS,
            AccountTransaction,
            access_token,
            account_id,
            params=params,
            timeout=timeout,
        )
        return envelope.results

    async def get_account_pending_transactions(
        self,
        access_token: str,
        account_id: str,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        timeout: float | None = None,
    ) -> List[AccountTransaction]:
        """Retrieve an account's pending transactions."""
        params = build_date_range(from_date, to_date)
        envelope = await self._get_results(
            Endpoint.ACCOUNT_PENDING_TRANSACTIONS,
            AccountTransaction,
            access_token,
            account_id,
            params=params,
            timeout=timeout,
        )
        return envelope.results

    async def get_account_standing_orders(
        self,
        access_token: str,
        account_id: str,
        timeout: float | None = None,
    ) -> List[AccountStandingOrder]:
        envelope = await self._get_results(
            Endpoint.ACCOUNT_STANDING_ORDERS,
            AccountStandingOrder,
            access_token,
            account_id,
            timeout=timeout,
        )
        return envelope.results

    async def get_account_direct_debits(
        self,
        access_token: str,
        account_id: str,
        timeout: float | None = None,
    ) -> List[AccountDirectDebit]:
        envelope = await self._get_results(
            Endpoint.ACCOUNT_DIRECT_DEBITS,
            AccountDirectDebit,
            access_token,
            account_id,
            timeout=timeout,
        )
        return envelope.results

    # =========================================================================
    # Async (webhook) flow
    # =========================================================================

    async def get_accounts_via_webhook(
        self,
        access_token: str,
        webhook_uri: str,
        timeout: float | None = None,
    ) -> AsyncRequestResponse:
        """
        Queue an accounts request whose result is announced on ``webhook_uri``.

        Fetch the payload with ``get_results`` once the webhook fires.
        """
        return await self._submit(
            Endpoint.ACCOUNTS, access_token, webhook_uri, timeout=timeout
        )

    async def get_account_via_webhook(
        self,
        access_token: str,
        account_id: str,
        webhook_uri: str,
        timeout: float | None = None,
    ) -> AsyncRequestResponse:
        return await self._submit(
            Endpoint.ACCOUNT, access_token, webhook_uri, account_id, timeout=timeout
        )

    async def get_account_balance_via_webhook(
        self,
        access_token: str,
        account_id: str,
        webhook_uri: str,
        timeout: float | None = None,
    ) -> AsyncRequestResponse:
        return await self._submit(
            Endpoint.ACCOUNT_BALANCE,
            access_token,
            webhook_uri,
            account_id,
            timeout=timeout,
        )

    async def get_account_transactions_via_webhook(
        self,
        access_token: str,
        account_id: str,
        webhook_uri: str,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        timeout: float | None = None,
    ) -> AsyncRequestResponse:
        params = build_date_range(from_date, to_date)
        return await self._submit(
            Endpoint.ACCOUNT_TRANSACTIONS,
            access_token,
            webhook_uri,
            account_id,
            params=params,
            timeout=timeout,
        )

    async def get_account_pending_transactions_via_webhook(
        self,
        access_token: str,
        account_id: str,
        webhook_uri: str,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        timeout: float | None = None,
    ) -> AsyncRequestResponse:
        params = build_date_range(from_date, to_date)
        return await self._submit(
            Endpoint.ACCOUNT_PENDING_TRANSACTIONS,
            access_token,
            webhook_uri,
            account_id,
            params=params,
            timeout=timeout,
        )

    async def get_account_standing_orders_via_webhook(
        self,
        access_token: str,
        account_id: str,
        webhook_uri: str,
        timeout: float | None = None,
    ) -> AsyncRequestResponse:
        return await self._submit(
            Endpoint.ACCOUNT_STANDING_ORDERS,
            access_token,
            webhook_uri,
            account_id,
            timeout=timeout,
        )

    async def get_account_direct_debits_via_webhook(
        self,
        access_token: str,
        account_id: str,
        webhook_uri: str,
        timeout: float | None = None,
    ) -> AsyncRequestResponse:
        return await self._submit(
            Endpoint.ACCOUNT_DIRECT_DEBITS,
            access_token,
            webhook_uri,
            account_id,
            timeout=timeout,
        )

    async def get_results(
        self,
        access_token: str,
        task_id: str,
        record_type: Type[RecordT],
        timeout: float | None = None,
    ) -> List[RecordT]:
        """
        Fetch the payload of a completed async task.

        Args:
            access_token: Token the task was submitted with
            task_id: ``task_id`` from the submission or the webhook
            record_type: Record type of the original request, e.g. ``Account``
        """
        envelope = await self._get_results(
            Endpoint.RESULTS, record_type, access_token, task_id, timeout=timeout
        )
        return envelope.results

    def handle_async_webhook_request_body(self, body: bytes | str) -> WebhookRequest:
        """
        Decode the body of an inbound async completion notification.

        Raises:
            MalformedResponse: If the body is not a webhook notification
            WebhookFailedError: If the notification reports a failed task
        """
        try:
            request = decode_webhook_request(body)
        except WebhookFailedError as e:
            record_webhook(TaskStatus.FAILED.value)
            logger.warning(
                "webhook_task_failed",
                task_id=e.request.task_id,
                error=e.error,
                description=e.description,
            )
            raise

        record_webhook(_status_label(request.status))
        logger.info(
            "webhook_received",
            task_id=request.task_id,
            status=request.status,
        )
        return request

    # =========================================================================
    # Request plumbing
    # =========================================================================

    async def _get_results(
        self,
        endpoint: Endpoint,
        record_type: Type[RecordT],
        access_token: str,
        *path_args: str,
        params: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> Results[RecordT]:
        response = await self._get(
            endpoint, access_token, *path_args, params=params, timeout=timeout
        )
        return self._decode(endpoint, response, Results[record_type])

    async def _submit(
        self,
        endpoint: Endpoint,
        access_token: str,
        webhook_uri: str,
        *path_args: str,
        params: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> AsyncRequestResponse:
        query = dict(params or {})
        query.update({"async": "true", "webhook_uri": webhook_uri})

        response = await self._get(
            endpoint, access_token, *path_args, params=query, timeout=timeout
        )
        return self._decode(endpoint, response, AsyncRequestResponse)

    async def _get(
        self,
        endpoint: Endpoint,
        access_token: str,
        *path_args: str,
        params: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        url = build_url(self._api_base_url, endpoint.value, *path_args, query=params)
        return await self._send(
            endpoint,
            "GET",
            url,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=timeout,
        )

    async def _send(
        self,
        endpoint: Endpoint,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        try:
            with track_api_latency(endpoint.label):
                response = await self._transport.send(
                    method,
                    url,
                    headers=headers,
                    body=body,
                    timeout=timeout,
                )
        except TransportTimeoutError:
            record_api_failure(endpoint.label, "timeout")
            logger.warning(
                "truelayer_request_timeout",
                endpoint=endpoint.label,
                method=method,
            )
            raise
        except TransportError as e:
            record_api_failure(endpoint.label, "transport")
            logger.error(
                "truelayer_transport_error",
                endpoint=endpoint.label,
                method=method,
                error=e.message,
            )
            raise

        record_api_response(endpoint.label, response.status_code)
        logger.debug(
            "truelayer_request_completed",
            endpoint=endpoint.label,
            method=method,
            status_code=response.status_code,
        )
        return response

    def _decode(
        self,
        endpoint: Endpoint,
        response: TransportResponse,
        model: Type[ModelT],
    ) -> ModelT:
        try:
            return decode_response(response, model)
        except APIError as e:
            record_api_failure(endpoint.label, "api_error")
            logger.warning(
                "truelayer_api_error",
                endpoint=endpoint.label,
                status_code=e.status_code,
                error=e.error,
                description=e.description,
            )
            raise
        except MalformedResponse as e:
            record_api_failure(endpoint.label, "malformed")
            logger.error(
                "truelayer_malformed_response",
                endpoint=endpoint.label,
                status_code=response.status_code,
                error_code=e.code,
            )
            raise
