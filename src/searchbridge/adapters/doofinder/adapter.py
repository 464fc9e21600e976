"""Doofinder adapter — Product search via the Doofinder Search API v5.

API reference (all GET, relative to ``https://{zone}-search.doofinder.com/5/``):
  search  ?hashid=<id>&query=<q>&rpp=<n>&page=<p>&filter[...]=...&sort[...]=...
  suggest ?hashid=<id>&query=<q>

Usage::

    async with DoofinderAdapter(zone="eu1", hash_id="...", auth_key="...") as adapter:
        result = await adapter.search_products("running shoes", offset=20, limit=20)
        print(result.product_ids, result.total_product_count)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from searchbridge.adapters.base.adapter import ProductSearchAdapter
from searchbridge.adapters.base.exceptions import ConfigurationError
from searchbridge.adapters.doofinder.transport import HttpxTransport, Transport
from searchbridge.core.filters import FilterNameMap, to_filter_descriptions, to_provider_filters
from searchbridge.core.identifiers import IdentifierRule, compile_identifier_rule
from searchbridge.core.pagination import MAX_PAGE_SIZE, fetch_window
from searchbridge.core.sorting import to_provider_sort
from searchbridge.models.filters import FilterDiscoveryResult, SuggestionResult
from searchbridge.models.provider import ProviderRequest
from searchbridge.models.search import SearchRequest, SearchResult

if TYPE_CHECKING:
    from searchbridge.config.settings import Settings

logger = logging.getLogger(__name__)

MAX_SUGGEST_QUERY_LENGTH = 88


class DoofinderAdapter(ProductSearchAdapter):
    """Search adapter for Doofinder.

    Supports:
      - Arbitrary offset/limit windows over Doofinder's paged search
      - Price range and multiselect filters, price sorting
      - Filter discovery from search facets
      - Search suggestions

    Provider errors (HTTP status >= 400) are logged and the response body is
    returned as-is; nothing is retried.

    Args:
        zone: Doofinder search zone, e.g. ``"eu1"``.
        hash_id: Search engine hash id.
        auth_key: Value sent in the ``Authorization`` header.
        filter_map: Provider filter name -> caller-facing filter name.
        product_id_key: Field name or JMESPath expression locating the product id.
        transport: Async callable performing provider requests. Defaults to an
            ``HttpxTransport`` owned by the adapter.
        timeout: HTTP timeout for the default transport, in seconds.
    """

    def __init__(
        self,
        zone: str,
        hash_id: str,
        auth_key: str = "",
        filter_map: Mapping[str, str] | None = None,
        product_id_key: str = "id",
        transport: Transport | None = None,
        timeout: float = 30.0,
    ) -> None:
        if not zone:
            raise ConfigurationError("Doofinder zone is required. Set it via doofinder.zone")
        if not hash_id:
            raise ConfigurationError("Doofinder hash id is required. Set it via doofinder.hash_id")

        self._base_uri = f"https://{zone}-search.doofinder.com/5/"
        self._hash_id = hash_id
        self._auth_key = auth_key
        self._filter_names = FilterNameMap(filter_map)
        self._product_id_rule: IdentifierRule = compile_identifier_rule(product_id_key)

        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings, transport: Transport | None = None) -> DoofinderAdapter:
        """Build an adapter from the ``doofinder`` settings section."""
        cfg = settings.doofinder
        return cls(
            zone=cfg.zone,
            hash_id=cfg.hash_id,
            auth_key=cfg.auth_key,
            filter_map=cfg.filter_map,
            product_id_key=cfg.product_id_key,
            transport=transport,
            timeout=cfg.timeout,
        )

    @property
    def name(self) -> str:
        return "doofinder"

    @property
    def base_uri(self) -> str:
        return self._base_uri

    async def initialize(self) -> None:
        """Open the default transport. Injected transports are left alone."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.open()
        logger.info("Doofinder adapter initialized (%s)", self._base_uri)

    async def shutdown(self) -> None:
        """Close the default transport."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.close()

    # ── Requests ─────────────────────────────────────────────────────────

    async def _request(self, params: dict[str, Any], endpoint: str = "search") -> Any:
        response = await self._transport(
            ProviderRequest(
                uri=self._base_uri + endpoint,
                query_params={"hashid": self._hash_id, **params},
                headers={"Authorization": self._auth_key},
                expect_json=True,
            )
        )

        if response.status_code >= 400:
            logger.error(
                "Doofinder error code %d in response: endpoint=%s request=%r body=%r",
                response.status_code,
                endpoint,
                params,
                response.body,
            )

        return response.body

    # ── Search ───────────────────────────────────────────────────────────

    async def search(self, request: SearchRequest) -> SearchResult:
        """Run a windowed search and map results to product ids.

        Results whose product id cannot be extracted are dropped and logged.
        """
        provider_filters = to_provider_filters(request.filters, self._filter_names)
        provider_sort = to_provider_sort(request.sort)

        async def fetch_page(page: int, rpp: int) -> Any:
            params: dict[str, Any] = {
                "query": request.search_phrase,
                "rpp": rpp,
                "filter": provider_filters,
                "page": page,
            }
            if provider_sort:
                params["sort"] = provider_sort
            return await self._request(params)

        window = await fetch_window(fetch_page, request.offset, request.limit, MAX_PAGE_SIZE)

        product_ids: list[Any] = []
        for result in window.results:
            product_id = self._product_id_rule.extract(result)
            if product_id is None or product_id == "":
                logger.error(
                    "Doofinder empty result or product key for request: "
                    "search_phrase=%r filters=%r offset=%d limit=%d sort=%s result=%r",
                    request.search_phrase,
                    request.filters,
                    request.offset,
                    request.limit,
                    request.sort.value if request.sort else None,
                    result,
                )
                continue
            product_ids.append(product_id)

        return SearchResult(product_ids=product_ids, total_product_count=window.total_product_count)

    # ── Filters ──────────────────────────────────────────────────────────

    async def get_filters(self, query: str) -> FilterDiscoveryResult:
        """Describe the filters available for ``query``.

        Raises:
            ProviderContractError: If the response facets are malformed.
        """
        body = await self._request({"query": query})
        facets = body.get("facets") if isinstance(body, dict) else None
        return FilterDiscoveryResult(filters=to_filter_descriptions(facets, self._filter_names))

    # ── Suggestions ──────────────────────────────────────────────────────

    async def get_search_suggestions(self, query: str) -> SuggestionResult:
        """Suggest search terms, capitalized, for ``query``."""
        body = await self._request({"query": query[:MAX_SUGGEST_QUERY_LENGTH]}, endpoint="suggest")
        results = body.get("results") if isinstance(body, dict) else None
        if not isinstance(results, list):
            return SuggestionResult()

        suggestions = [
            item["term"][:1].upper() + item["term"][1:]
            for item in results
            if isinstance(item, dict) and isinstance(item.get("term"), str)
        ]
        return SuggestionResult(suggestions=suggestions)
