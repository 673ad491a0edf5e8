"""External API client implementations."""

from .truelayer_client import TrueLayerClient

__all__ = [
    "TrueLayerClient",
]
