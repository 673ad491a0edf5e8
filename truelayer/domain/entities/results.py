"""Results envelope wrapping every data API payload."""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict

RecordT = TypeVar("RecordT", bound=BaseModel)


class Results(BaseModel, Generic[RecordT]):
    """Wire wrapper holding exactly one list of records under ``results``."""

    model_config = ConfigDict(frozen=True)

    results: List[RecordT]
