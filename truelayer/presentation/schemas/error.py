"""Pydantic schema for API error responses."""

from typing import Any, Dict

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all demo app errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["API_ERROR"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["invalid_grant: The code has expired"],
    )
    details: Dict[str, Any] | None = Field(
        None,
        description="Field-level details reported by TrueLayer",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "API_ERROR",
                    "message": "invalid_grant: The code has expired",
                    "details": None,
                }
            ]
        }
    }
