"""HTTP transport for provider calls, built on ``httpx``.

The adapter hands the transport a ``ProviderRequest`` and gets back a
``ProviderResponse``. Any async callable with that signature can be injected
in place of ``HttpxTransport`` (tests do exactly that).

Doofinder parses query strings the way the ``qs`` library does, so nested
parameters are flattened to bracket notation::

    flatten_params({"filter": {"price": {"gte": 10}, "brand": ["a", "b"]}})
    # [("filter[price][gte]", "10"), ("filter[brand][0]", "a"), ("filter[brand][1]", "b")]
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx

from searchbridge.adapters.base.exceptions import ConnectionError
from searchbridge.models.provider import ProviderRequest, ProviderResponse

logger = logging.getLogger(__name__)

Transport = Callable[[ProviderRequest], Awaitable[ProviderResponse]]


def flatten_params(params: Mapping[str, Any], prefix: str = "") -> list[tuple[str, str]]:
    """Flatten nested mappings and sequences into bracketed query pairs.

    ``None`` values are dropped; booleans render as ``true``/``false``.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        pairs.extend(_flatten_value(name, value))
    return pairs


def _flatten_value(name: str, value: Any) -> list[tuple[str, str]]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return flatten_params(value, prefix=name)
    if isinstance(value, (list, tuple, set, frozenset)):
        pairs: list[tuple[str, str]] = []
        for index, item in enumerate(value):
            pairs.extend(_flatten_value(f"{name}[{index}]", item))
        return pairs
    if isinstance(value, bool):
        return [(name, "true" if value else "false")]
    return [(name, str(value))]


class HttpxTransport:
    """Provider transport backed by an ``httpx.AsyncClient``.

    Args:
        timeout: Request timeout in seconds.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.
    """

    def __init__(self, timeout: float = 30.0, **httpx_kwargs: Any) -> None:
        self._timeout = timeout
        self._httpx_kwargs = httpx_kwargs
        self._client: httpx.AsyncClient | None = None

    async def open(self) -> None:
        """Create the underlying HTTP client (idempotent)."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                **self._httpx_kwargs,
            )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __call__(self, request: ProviderRequest) -> ProviderResponse:
        if self._client is None:
            raise ConnectionError("Doofinder transport not initialized.")

        headers = dict(request.headers)
        if request.expect_json:
            headers.setdefault("Accept", "application/json")

        try:
            response = await self._client.get(
                request.uri,
                params=flatten_params(request.query_params),
                headers=headers,
            )
        except httpx.RequestError as e:
            raise ConnectionError(f"Doofinder request failed: {e}") from e

        body: Any = response.text
        if request.expect_json:
            try:
                body = response.json()
            except ValueError:
                logger.debug("Doofinder response is not JSON (status %d)", response.status_code)

        return ProviderResponse(status_code=response.status_code, body=body)
