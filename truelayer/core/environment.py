"""Production and sandbox host selection."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Environment:
    """Base URLs of the authorization host and the data host."""

    auth_base_url: str
    api_base_url: str


PRODUCTION = Environment(
    auth_base_url="https://auth.truelayer.com",
    api_base_url="https://api.truelayer.com",
)

SANDBOX = Environment(
    auth_base_url="https://auth.truelayer-sandbox.com",
    api_base_url="https://api.truelayer-sandbox.com",
)


def select_environment(sandbox: bool) -> Environment:
    """Return the sandbox hosts when ``sandbox`` is set, production otherwise."""
    return SANDBOX if sandbox else PRODUCTION
