"""Shared pydantic bases for upstream records and form payloads.

The upstream backend speaks camelCase JSON; Python code uses snake_case
attributes and the aliases take care of the wire format in both
directions.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

RecordId = int | str

# A required text input: whitespace-only is treated as empty.
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CamelModel(BaseModel):
    """Base model with camelCase aliases; accepts either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Record(CamelModel):
    """A record as returned by the backend.

    Unknown fields are kept and passed through verbatim so nothing the
    backend adds is lost on the way to the browser.
    """

    model_config = ConfigDict(extra="allow")

    id: RecordId
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Form(CamelModel):
    """A create / edit form submitted by the browser."""

    def to_payload(self, *, partial: bool = False) -> dict[str, Any]:
        """Body for the upstream request.

        Create forms drop empty optionals; partial (edit) forms send only
        the fields the caller actually set, so an explicit ``null`` clears
        a value.
        """
        if partial:
            return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
