"""Pydantic schemas for /records items and the retrieve() summary."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DISPOSITION_OPEN = "open"
DISPOSITION_CLOSED = "closed"

PRIMARY_COLORS = frozenset({"red", "blue", "yellow"})


class Record(BaseModel):
    """Single item from /records. Missing fields are None; any other fields are kept as-is."""

    model_config = ConfigDict(extra="allow", frozen=True)

    id: int | str | None = None
    color: str | None = None
    disposition: str | None = None  # "open" | "closed"


class OpenRecord(Record):
    """Record with disposition "open", flagged when its color is primary."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    is_primary: bool = Field(alias="isPrimary")


class RetrieveOptions(BaseModel):
    """Options accepted by retrieve(). Empty colors means all colors."""

    page: int = 1
    colors: list[str] = Field(default_factory=list)


class RetrieveResult(BaseModel):
    """One page of records summarized for the client."""

    model_config = ConfigDict(populate_by_name=True)

    previous_page: int | None = Field(default=None, alias="previousPage")
    next_page: int | None = Field(default=None, alias="nextPage")
    ids: list[int | str | None] = Field(default_factory=list)
    open: list[OpenRecord] = Field(default_factory=list)
    closed_primary_count: int = Field(default=0, ge=0, alias="closedPrimaryCount")

    def to_dict(self) -> dict[str, Any]:
        """camelCase dict as sent to clients."""
        return self.model_dump(by_alias=True)
