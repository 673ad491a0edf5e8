"""Standing order entity."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from .base import WireModel


class StandingOrderMeta(WireModel):
    provider_account_id: Optional[str] = None


class AccountStandingOrder(WireModel):
    """A recurring payment instruction set up by the account holder."""

    frequency: str
    status: Optional[str] = None
    timestamp: datetime
    currency: str
    meta: StandingOrderMeta = StandingOrderMeta()
    next_payment_date: Optional[datetime] = None
    next_payment_amount: Optional[Decimal] = None
    first_payment_date: Optional[datetime] = None
    first_payment_amount: Optional[Decimal] = None
    final_payment_date: Optional[datetime] = None
    final_payment_amount: Optional[Decimal] = None
    reference: Optional[str] = None
    payee: Optional[str] = None
