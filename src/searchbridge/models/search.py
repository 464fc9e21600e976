"""Search request and result models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class SortOrder(str, Enum):
    """Closed set of generic sort tokens accepted from callers."""

    NONE = "none"
    PRICE_ASC = "priceAsc"
    PRICE_DESC = "priceDesc"


class RangeFilter(BaseModel):
    """Numeric range filter. Bounds are integer cents."""

    minimum: float = Field(description="Lower bound in cents (inclusive)")
    maximum: float = Field(description="Upper bound in cents (exclusive)")


class MultiselectFilter(BaseModel):
    """Multi-value filter matching any of ``values``."""

    values: list[str] = Field(description="Selected values, in caller order")


FilterValue = RangeFilter | MultiselectFilter


class SearchRequest(BaseModel):
    """Generic product search request."""

    search_phrase: str = Field(default="", description="Free-text search phrase")
    filters: dict[str, FilterValue] = Field(default_factory=dict, description="Filter id -> filter value")
    offset: int = Field(default=0, ge=0, description="Global index of the first product to return")
    limit: int = Field(default=10, ge=1, description="Number of products to return")
    sort: SortOrder | None = Field(default=None, description="Sort token")


class SearchResult(BaseModel):
    """Product identifiers for one search window."""

    product_ids: list[Any] = Field(default_factory=list, description="Product ids, in provider order")
    total_product_count: int = Field(default=0, description="Total matches reported by the provider")


class WindowResult(BaseModel):
    """Raw provider records trimmed to the requested offset/limit window."""

    results: list[dict[str, Any]] = Field(default_factory=list)
    total_product_count: int = 0
