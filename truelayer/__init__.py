"""
TrueLayer Client - Typed client for the TrueLayer open-banking API

Authorization-code and refresh-token flows plus the accounts, balance,
transactions, standing orders and direct debits endpoints, synchronous or
through the async webhook flow.
"""

__version__ = "0.1.0"

from truelayer.domain.entities import (  # noqa: E402
    ALL_PERMISSIONS,
    AccessToken,
    Account,
    AccountBalance,
    AccountDirectDebit,
    AccountStandingOrder,
    AccountTransaction,
    AsyncRequestResponse,
    Permission,
    Provider,
    WebhookRequest,
)
from truelayer.domain.exceptions import (  # noqa: E402
    APIError,
    EmptyResult,
    InvalidDateRange,
    MalformedErrorResponse,
    MalformedResponse,
    MalformedURL,
    TransportError,
    TransportTimeoutError,
    TrueLayerException,
    WebhookFailedError,
)
from truelayer.infrastructure.clients import TrueLayerClient  # noqa: E402

__all__ = [
    "__version__",
    "TrueLayerClient",
    "ALL_PERMISSIONS",
    "AccessToken",
    "Account",
    "AccountBalance",
    "AccountDirectDebit",
    "AccountStandingOrder",
    "AccountTransaction",
    "AsyncRequestResponse",
    "Permission",
    "Provider",
    "WebhookRequest",
    "APIError",
    "EmptyResult",
    "InvalidDateRange",
    "MalformedErrorResponse",
    "MalformedResponse",
    "MalformedURL",
    "TransportError",
    "TransportTimeoutError",
    "TrueLayerException",
    "WebhookFailedError",
]
