"""Error body returned by the TrueLayer API."""

from typing import Any, Dict, Optional

from .base import WireModel


class ErrorResponse(WireModel):
    """Error representation returned for any HTTP status >= 300."""

    error: str
    error_description: str = ""
    error_details: Optional[Dict[str, Any]] = None
