"""Account entities."""

from datetime import datetime
from typing import Optional

from .base import WireModel


class AccountNumber(WireModel):
    iban: Optional[str] = None
    number: Optional[str] = None
    sort_code: Optional[str] = None
    swift_bic: Optional[str] = None


class AccountProvider(WireModel):
    provider_id: str
    display_name: Optional[str] = None
    logo_uri: Optional[str] = None


class Account(WireModel):
    """Snapshot of a bank account at fetch time."""

    account_id: str
    account_type: Optional[str] = None
    display_name: Optional[str] = None
    currency: Optional[str] = None
    account_number: AccountNumber = AccountNumber()
    provider: Optional[AccountProvider] = None
    update_timestamp: Optional[datetime] = None
