"""Pydantic schemas for API request/response validation."""

from .error import ErrorResponseSchema

__all__ = [
    "ErrorResponseSchema",
]
