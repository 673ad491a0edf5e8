"""Access token returned by the token endpoint."""

from typing import Optional

from pydantic import Field

from .base import WireModel


class AccessToken(WireModel):
    """
    Token pair issued by ``/connect/token``.

    Callers own persistence and refresh scheduling.
    """

    access_token: str
    expires_in: int = Field(..., description="Lifetime in seconds")
    token_type: str = "Bearer"
    refresh_token: Optional[str] = None
