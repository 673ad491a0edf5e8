"""Dependency injection for FastAPI."""

from truelayer.infrastructure.clients import TrueLayerClient


def get_truelayer_client() -> TrueLayerClient:
    """Get a TrueLayerClient configured from the environment."""
    return TrueLayerClient.from_settings()
