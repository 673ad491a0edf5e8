"""Data API scopes that can be requested in an authentication link."""

from enum import Enum
from typing import Tuple


class Permission(str, Enum):
    ACCOUNTS = "accounts"
    BALANCE = "balance"
    CARDS = "cards"
    TRANSACTIONS = "transactions"
    DIRECT_DEBITS = "direct_debits"
    STANDING_ORDERS = "standing_orders"
    OFFLINE_ACCESS = "offline_access"
    INFO = "info"


# Every scope, in the order the API documents them
ALL_PERMISSIONS: Tuple[Permission, ...] = (
    Permission.ACCOUNTS,
    Permission.BALANCE,
    Permission.CARDS,
    Permission.TRANSACTIONS,
    Permission.DIRECT_DEBITS,
    Permission.STANDING_ORDERS,
    Permission.OFFLINE_ACCESS,
    Permission.INFO,
)
