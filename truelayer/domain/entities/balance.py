"""Account balance entity."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from .base import WireModel


class AccountBalance(WireModel):
    """
    Balance of an account.

    Amounts are decimals in the account currency's major unit.
    """

    currency: str
    available: Optional[Decimal] = None
    current: Optional[Decimal] = None
    overdraft: Optional[Decimal] = None
    update_timestamp: Optional[datetime] = None
