"""Sort translation — generic sort tokens to Doofinder sort specs."""

from __future__ import annotations

from searchbridge.models.search import SortOrder

_SORTS: dict[str, dict[str, str]] = {
    SortOrder.PRICE_ASC.value: {"price": "asc"},
    SortOrder.PRICE_DESC.value: {"price": "desc"},
}


def to_provider_sort(sort: SortOrder | str | None) -> dict[str, str]:
    """Return the provider sort spec for ``sort``.

    Unknown tokens, ``none`` and ``None`` yield an empty spec, meaning the
    provider's relevance order is kept.
    """
    if sort is None:
        return {}
    token = sort.value if isinstance(sort, SortOrder) else sort
    return dict(_SORTS.get(token, {}))
