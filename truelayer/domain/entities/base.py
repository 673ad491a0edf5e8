"""Shared configuration for records decoded from the TrueLayer API."""

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """
    Immutable record whose field names match the wire keys.

    Unknown keys are ignored so additions to the API do not break decoding.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")
