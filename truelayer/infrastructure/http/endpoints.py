"""Path templates of the TrueLayer auth and data APIs."""

from enum import Enum


class Endpoint(str, Enum):
    # Auth host
    AUTH_LINK = "/"
    TOKEN = "/connect/token"

    # Data host
    ACCOUNTS = "/data/v1/accounts"
    ACCOUNT = "/data/v1/accounts/{}"
    ACCOUNT_BALANCE = "/data/v1/accounts/{}/balance"
    ACCOUNT_TRANSACTIONS = "/data/v1/accounts/{}/transactions"
    ACCOUNT_PENDING_TRANSACTIONS = "/data/v1/accounts/{}/transactions/pending"
    ACCOUNT_STANDING_ORDERS = "/data/v1/accounts/{}/standing_orders"
    ACCOUNT_DIRECT_DEBITS = "/data/v1/accounts/{}/direct_debits"
    RESULTS = "/data/v1/results/{}"

    @property
    def label(self) -> str:
        """Short name used in logs and metric labels."""
        return self.name.lower()
