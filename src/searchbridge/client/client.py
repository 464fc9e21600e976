"""Synchronous client wrapping the async ``DoofinderAdapter``.

Each call opens a fresh adapter (and HTTP connection pool), runs the
coroutine to completion and closes it again. Long-running async services
should use ``DoofinderAdapter`` directly.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine, Mapping
from typing import Any, TypeVar

from searchbridge.adapters.doofinder.adapter import DoofinderAdapter
from searchbridge.adapters.doofinder.transport import Transport
from searchbridge.config.settings import Settings
from searchbridge.models.filters import FilterDiscoveryResult, SuggestionResult
from searchbridge.models.search import SearchResult, SortOrder

_T = TypeVar("_T")


class DoofinderClient:
    """Synchronous Doofinder search client.

    Args:
        settings: Application settings; only the ``doofinder`` section is used.
        transport: Optional transport injected into every adapter created.
    """

    def __init__(self, settings: Settings | None = None, *, transport: Transport | None = None) -> None:
        self._settings = settings or Settings()
        self._transport = transport

    def _run(self, coro: Coroutine[Any, Any, _T]) -> _T:
        """Run an async coroutine synchronously."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop and loop.is_running():
            # Already inside an event loop (e.g. Jupyter): run in a worker thread
            import concurrent.futures

            with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
                return pool.submit(asyncio.run, coro).result()
        return asyncio.run(coro)

    def _make_adapter(self) -> DoofinderAdapter:
        return DoofinderAdapter.from_settings(self._settings, transport=self._transport)

    def search_products(
        self,
        search_phrase: str,
        filters: Mapping[str, Any] | None = None,
        offset: int = 0,
        limit: int = 10,
        sort: SortOrder | str | None = None,
    ) -> SearchResult:
        """Search products and return the ids of the requested window."""

        async def _call() -> SearchResult:
            async with self._make_adapter() as adapter:
                return await adapter.search_products(search_phrase, filters, offset, limit, sort)

        return self._run(_call())

    def get_filters(self, query: str) -> FilterDiscoveryResult:
        """Describe the filters available for ``query``."""

        async def _call() -> FilterDiscoveryResult:
            async with self._make_adapter() as adapter:
                return await adapter.get_filters(query)

        return self._run(_call())

    def get_search_suggestions(self, query: str) -> SuggestionResult:
        """Return search term suggestions for ``query``."""

        async def _call() -> SuggestionResult:
            async with self._make_adapter() as adapter:
                return await adapter.get_search_suggestions(query)

        return self._run(_call())
