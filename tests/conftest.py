"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any

import pytest

from searchbridge.adapters.doofinder.adapter import DoofinderAdapter
from searchbridge.config.settings import Settings
from searchbridge.models.provider import ProviderRequest, ProviderResponse


class CatalogTransport:
    """In-memory provider serving a fixed catalog with Doofinder paging.

    Records every request so tests can assert on pages and parameters.
    """

    def __init__(self, catalog: list[dict[str, Any]] | None = None, status_code: int = 200) -> None:
        self.catalog = catalog or []
        self.status_code = status_code
        self.requests: list[ProviderRequest] = []

    @property
    def pages(self) -> list[int]:
        return [r.query_params["page"] for r in self.requests if "page" in r.query_params]

    async def __call__(self, request: ProviderRequest) -> ProviderResponse:
        self.requests.append(request)
        params = request.query_params
        rpp = params.get("rpp", 10)
        page = params.get("page", 1)
        start = (page - 1) * rpp
        return ProviderResponse(
            status_code=self.status_code,
            body={
                "total": len(self.catalog),
                "results": self.catalog[start : start + rpp],
                "page": page,
            },
        )


class StaticTransport:
    """Provider returning the same body for every request."""

    def __init__(self, body: Any, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code
        self.requests: list[ProviderRequest] = []

    async def __call__(self, request: ProviderRequest) -> ProviderResponse:
        self.requests.append(request)
        return ProviderResponse(status_code=self.status_code, body=self.body)


def make_catalog(size: int) -> list[dict[str, Any]]:
    return [{"id": f"p{i}", "title": f"Product {i}", "price": i * 1.5} for i in range(size)]


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        doofinder={
            "zone": "eu1",
            "hash_id": "test-hash",
            "auth_key": "test-key",
            "filter_map": {"brand": "marca"},
            "product_id_key": "id",
        },
    )


@pytest.fixture
def catalog_transport() -> CatalogTransport:
    return CatalogTransport(make_catalog(1000))


@pytest.fixture
def adapter(catalog_transport: CatalogTransport) -> DoofinderAdapter:
    return DoofinderAdapter(
        zone="eu1",
        hash_id="test-hash",
        auth_key="test-key",
        filter_map={"brand": "marca"},
        product_id_key="id",
        transport=catalog_transport,
    )


@pytest.fixture
def sample_facets() -> dict[str, Any]:
    """Facets as returned by the Doofinder search endpoint."""
    return {
        "grouping_count": {"value": 42},
        "brand": {
            "doc_count": 12,
            "terms": {
                "buckets": [
                    {"key": "acme", "doc_count": 8},
                    {"key": "globex", "doc_count": 4},
                ],
            },
        },
        "color": {"doc_count": 0, "terms": {"buckets": []}},
        "best_price": {
            "doc_count": 12,
            "range": {
                "buckets": [
                    {
                        "key": "0.0-*",
                        "from": 0.0,
                        "doc_count": 12,
                        "stats": {"min": 9.991, "max": 129.001, "avg": 50.0, "sum": 600.0, "count": 12},
                    },
                ],
            },
        },
    }


@pytest.fixture
def make_catalog_transport():
    """Factory for catalog-backed transports of a given size."""

    def _make(size: int, status_code: int = 200) -> CatalogTransport:
        return CatalogTransport(make_catalog(size), status_code=status_code)

    return _make


@pytest.fixture
def make_static_transport():
    """Factory for transports returning a fixed body."""

    def _make(body: Any, status_code: int = 200) -> StaticTransport:
        return StaticTransport(body, status_code=status_code)

    return _make


@pytest.fixture
def make_adapter():
    """Factory for adapters wired to a given transport."""

    def _make(transport: Any, **kwargs: Any) -> DoofinderAdapter:
        options: dict[str, Any] = {
            "zone": "eu1",
            "hash_id": "test-hash",
            "auth_key": "test-key",
            "filter_map": {"brand": "marca"},
        }
        options.update(kwargs)
        return DoofinderAdapter(transport=transport, **options)

    return _make
