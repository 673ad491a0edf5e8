"""Domain Entities - Records exchanged with the TrueLayer API."""

from .account import Account, AccountNumber, AccountProvider
from .async_request import AsyncRequestResponse, TaskStatus, WebhookRequest
from .balance import AccountBalance
from .credentials import ClientCredentials
from .direct_debit import AccountDirectDebit, DirectDebitMeta
from .error import ErrorResponse
from .permission import ALL_PERMISSIONS, Permission
from .provider import Provider
from .results import Results
from .standing_order import AccountStandingOrder, StandingOrderMeta
from .token import AccessToken
from .transaction import (
    AccountTransaction,
    RunningBalance,
    TransactionMeta,
    TransactionType,
)

__all__ = [
    "Account",
    "AccountNumber",
    "AccountProvider",
    "AsyncRequestResponse",
    "TaskStatus",
    "WebhookRequest",
    "AccountBalance",
    "ClientCredentials",
    "AccountDirectDebit",
    "DirectDebitMeta",
    "ErrorResponse",
    "ALL_PERMISSIONS",
    "Permission",
    "Provider",
    "Results",
    "AccountStandingOrder",
    "StandingOrderMeta",
    "AccessToken",
    "AccountTransaction",
    "RunningBalance",
    "TransactionMeta",
    "TransactionType",
]
