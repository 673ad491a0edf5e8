"""HTTP routes of the demo application."""

from .v1 import router as api_router

__all__ = ["api_router"]
