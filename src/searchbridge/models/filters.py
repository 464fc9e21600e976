"""Filter discovery models — generic descriptions of the provider's facets."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

FILTER_SOURCE = "doofinder"


class FilterOption(BaseModel):
    """A single selectable value of a multiselect filter."""

    id: str
    label: str
    hits: int = Field(default=0, description="Number of matching documents")


class FilterDescription(BaseModel):
    """A filter the caller may apply to the current query.

    Range bounds are expressed in cents: provider values are scaled by 100,
    the minimum floored and the maximum ceiled.
    """

    id: str = Field(description="Provider-side filter name")
    label: str = Field(description="Caller-facing filter name")
    source: str = Field(default=FILTER_SOURCE)
    type: Literal["range", "multiselect"]
    minimum: int | None = None
    maximum: int | None = None
    values: list[FilterOption] | None = None


class FilterDiscoveryResult(BaseModel):
    """Response of a filter discovery call."""

    filters: list[FilterDescription] = Field(default_factory=list)


class SuggestionResult(BaseModel):
    """Response of a search suggestion call."""

    suggestions: list[str] = Field(default_factory=list)
