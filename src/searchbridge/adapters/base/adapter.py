"""Base product search adapter — Abstract interface for search provider connectors.

Every provider must implement this interface. The adapter is responsible for:
  1. Translating generic search requests into provider queries
  2. Mapping provider results to product identifiers
  3. Describing the filters available for a query
  4. Returning search-as-you-type suggestions
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from searchbridge.models.filters import FilterDiscoveryResult, SuggestionResult
from searchbridge.models.search import SearchRequest, SearchResult, SortOrder


class ProductSearchAdapter(ABC):
    """Abstract base class for product search adapters.

    All adapters must implement:
      - search(): Run a windowed search and return product ids
      - get_filters(): Describe the filters available for a query
      - get_search_suggestions(): Suggest search terms for a partial query

    Adapters hold only immutable configuration after construction, so one
    instance may serve concurrent calls.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique adapter name (e.g., 'doofinder')."""

    @abstractmethod
    async def initialize(self) -> None:
        """Open connections. Called once before the first request."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Release connections opened by ``initialize()``."""

    @abstractmethod
    async def search(self, request: SearchRequest) -> SearchResult:
        """Run a search and return the product ids of the requested window.

        Args:
            request: The generic search request.

        Returns:
            Product ids and the provider's total match count.
        """

    @abstractmethod
    async def get_filters(self, query: str) -> FilterDiscoveryResult:
        """Describe the filters available for ``query``."""

    @abstractmethod
    async def get_search_suggestions(self, query: str) -> SuggestionResult:
        """Return search term suggestions for ``query``."""

    async def search_products(
        self,
        search_phrase: str,
        filters: Mapping[str, Any] | None = None,
        offset: int = 0,
        limit: int = 10,
        sort: SortOrder | str | None = None,
    ) -> SearchResult:
        """Validate plain arguments into a ``SearchRequest`` and search.

        Raises:
            pydantic.ValidationError: If offset, limit, sort or filters are invalid.
        """
        request = SearchRequest(
            search_phrase=search_phrase,
            filters=dict(filters or {}),
            offset=offset,
            limit=limit,
            sort=sort,
        )
        return await self.search(request)

    async def __aenter__(self) -> ProductSearchAdapter:
        await self.initialize()
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.shutdown()
