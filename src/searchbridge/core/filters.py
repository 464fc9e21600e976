"""Filter translation between generic filters and Doofinder query/facet shapes.

Outgoing, a generic filter set becomes the ``filter`` query parameter::

    {"price": RangeFilter(minimum=1000, maximum=5000), "marca": MultiselectFilter(values=["acme"])}
    # -> {"price": {"gte": 10.0, "lt": 50.0}, "brand": ["acme"]}

Incoming, the ``facets`` of a search response become ``FilterDescription``
objects. The two directions do not share a shape.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from searchbridge.adapters.base.exceptions import ConfigurationError, ProviderContractError, QueryError
from searchbridge.models.filters import FilterDescription, FilterOption
from searchbridge.models.search import FilterValue, MultiselectFilter, RangeFilter

logger = logging.getLogger(__name__)

PRICE_FILTER = "price"
IGNORED_FACETS = frozenset({"grouping_count"})


class FilterNameMap:
    """Bidirectional provider <-> caller filter name lookup.

    Built from the configured mapping of provider name to caller-facing name.
    Names missing from the map translate to themselves.
    """

    def __init__(self, provider_to_caller: Mapping[str, str] | None = None) -> None:
        forward = dict(provider_to_caller or {})
        reverse: dict[str, str] = {}
        for provider_name, caller_name in forward.items():
            if caller_name in reverse:
                raise ConfigurationError(
                    f"Filter map is not one-to-one: '{reverse[caller_name]}' and "
                    f"'{provider_name}' both map to '{caller_name}'"
                )
            reverse[caller_name] = provider_name
        self._forward = MappingProxyType(forward)
        self._reverse = MappingProxyType(reverse)

    @property
    def forward(self) -> Mapping[str, str]:
        return self._forward

    @property
    def reverse(self) -> Mapping[str, str]:
        return self._reverse

    def to_provider(self, caller_name: str) -> str:
        return self._reverse.get(caller_name, caller_name)

    def to_caller(self, provider_name: str) -> str:
        return self._forward.get(provider_name, provider_name)


def to_provider_filters(
    filters: Mapping[str, FilterValue] | None,
    name_map: FilterNameMap,
) -> dict[str, Any]:
    """Translate generic filters into the provider's ``filter`` parameter.

    The price range is converted from cents to currency units with an
    inclusive lower bound (``gte``) and an exclusive upper bound (``lt``).

    Raises:
        QueryError: If ``price`` is not a range, or another filter is.
    """
    provider_filters: dict[str, Any] = {}
    for filter_id, value in (filters or {}).items():
        if filter_id == PRICE_FILTER:
            if not isinstance(value, RangeFilter):
                raise QueryError("The price filter must be a range with minimum and maximum")
            provider_filters[filter_id] = {
                "gte": value.minimum / 100,
                "lt": value.maximum / 100,
            }
        elif isinstance(value, MultiselectFilter):
            provider_filters[name_map.to_provider(filter_id)] = list(value.values)
        else:
            raise QueryError(f"Range filters are only supported for price, got '{filter_id}'")
    return provider_filters


def to_filter_descriptions(facets: Any, name_map: FilterNameMap) -> list[FilterDescription]:
    """Translate provider facets into generic filter descriptions.

    ``grouping_count`` and terms facets without buckets are skipped. Any
    other facet that is neither a range nor a terms facet is a contract
    violation.

    Raises:
        ProviderContractError: If a facet lacks the expected structure.
    """
    if not isinstance(facets, Mapping):
        raise ProviderContractError(f"Doofinder facets must be an object, got {type(facets).__name__}")

    descriptions: list[FilterDescription] = []
    for facet_id, facet in facets.items():
        if facet_id in IGNORED_FACETS:
            continue
        try:
            description = _describe_facet(facet_id, facet, name_map)
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
            raise ProviderContractError(f"Malformed Doofinder facet '{facet_id}': {e!r}") from e
        if description is not None:
            descriptions.append(description)
    return descriptions


def _describe_facet(facet_id: str, facet: Mapping[str, Any], name_map: FilterNameMap) -> FilterDescription | None:
    label = name_map.to_caller(facet_id)

    if facet.get("range"):
        stats = facet["range"]["buckets"][0]["stats"]
        return FilterDescription(
            id=facet_id,
            label=label,
            type="range",
            minimum=math.floor(stats["min"] * 100),
            maximum=math.ceil(stats["max"] * 100),
        )

    if facet.get("terms"):
        buckets = facet["terms"]["buckets"]
        if not buckets:
            return None
        return FilterDescription(
            id=facet_id,
            label=label,
            type="multiselect",
            values=[
                FilterOption(id=str(bucket["key"]), label=str(bucket["key"]), hits=bucket["doc_count"])
                for bucket in buckets
            ],
        )

    raise ValueError("facet has neither 'range' nor 'terms'")
