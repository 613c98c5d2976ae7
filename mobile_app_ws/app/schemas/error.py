"""Uniform error payload returned by every failed request."""

from datetime import datetime, timezone
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorMessage(BaseModel):
    """Schema for an error response.

    ``errors`` maps field names to messages and is only present when
    the request body failed validation.
    """

    time_stamp: datetime = Field(default_factory=_utcnow)
    message: str
    errors: Optional[Dict[str, str]] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
