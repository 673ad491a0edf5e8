"""Direct debit entity."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from .base import WireModel


class DirectDebitMeta(WireModel):
    provider_mandate_identification: Optional[str] = None
    provider_account_id: Optional[str] = None


class AccountDirectDebit(WireModel):
    """A direct debit mandate and its last collected payment."""

    direct_debit_id: str
    timestamp: datetime
    name: str
    status: Optional[str] = None
    previous_payment_timestamp: Optional[datetime] = None
    previous_payment_amount: Optional[Decimal] = None
    currency: Optional[str] = None
    meta: DirectDebitMeta = DirectDebitMeta()
