"""Account transaction entities."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from .base import WireModel


class TransactionType(str, Enum):
    """Direction of a transaction."""

    CREDIT = "CREDIT"  # Money in
    DEBIT = "DEBIT"  # Money out


class RunningBalance(WireModel):
    amount: Decimal
    currency: str


class TransactionMeta(WireModel):
    bank_transaction_id: Optional[str] = None
    provider_transaction_category: Optional[str] = None


class AccountTransaction(WireModel):
    """
    A settled or pending account transaction.

    ``transaction_classification`` keeps the provider's category order,
    most general first.
    """

    transaction_id: str
    provider_transaction_id: Optional[str] = None
    normalised_provider_transaction_id: Optional[str] = None
    timestamp: datetime
    description: str = ""
    amount: Decimal
    currency: str
    transaction_type: Optional[str] = None
    transaction_category: Optional[str] = None
    transaction_classification: List[str] = []
    merchant_name: Optional[str] = None
    running_balance: Optional[RunningBalance] = None
    meta: TransactionMeta = TransactionMeta()

    @property
    def is_credit(self) -> bool:
        return self.transaction_type == TransactionType.CREDIT

    @property
    def is_debit(self) -> bool:
        return self.transaction_type == TransactionType.DEBIT
