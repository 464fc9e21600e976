"""Transport-level models exchanged with the search provider."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ProviderRequest(BaseModel):
    """A single provider call, as handed to the transport."""

    uri: str
    query_params: dict[str, Any] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)
    expect_json: bool = True


class ProviderResponse(BaseModel):
    """Status code and (decoded) body of a provider call."""

    status_code: int
    body: Any = None
