"""
Domain Interfaces (Ports)
"""

from .transport import HttpTransport, TransportResponse

__all__ = [
    "HttpTransport",
    "TransportResponse",
]
