"""Page windowing — arbitrary offset/limit windows over a page-based API.

The provider only serves 1-indexed pages of at most ``MAX_PAGE_SIZE``
records. A caller asking for "items 37-45" needs one or more page fetches
whose concatenation is trimmed on both ends::

    plan_window(offset=150, limit=20)
    # PageWindow(rpp=20, first_page=8, last_page=9, skip_count=10)

Pages are fetched strictly one after another: results are appended in page
order and the reported total is the one from the last page fetched. Do not
gather them concurrently.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from searchbridge.adapters.base.exceptions import QueryError
from searchbridge.models.search import WindowResult

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100

PageFetcher = Callable[[int, int], Awaitable[Any]]
"""Async callable ``(page, rpp)`` returning the raw provider body for a 1-indexed page."""


@dataclass(frozen=True)
class PageWindow:
    """Provider pages covering an offset/limit window."""

    rpp: int
    first_page: int
    last_page: int
    skip_count: int

    @property
    def pages(self) -> range:
        return range(self.first_page, self.last_page + 1)


def plan_window(offset: int, limit: int, max_page_size: int = MAX_PAGE_SIZE) -> PageWindow:
    """Compute the minimal page range for ``offset``/``limit``.

    Raises:
        QueryError: If ``limit`` or ``max_page_size`` is below 1, or ``offset`` is negative.
    """
    if limit < 1:
        raise QueryError(f"limit must be a positive integer, got {limit}")
    if offset < 0:
        raise QueryError(f"offset must be non-negative, got {offset}")
    if max_page_size < 1:
        raise QueryError(f"max_page_size must be a positive integer, got {max_page_size}")

    rpp = min(limit, max_page_size)
    return PageWindow(
        rpp=rpp,
        first_page=offset // rpp + 1,
        last_page=math.ceil((offset + limit) / rpp),
        skip_count=offset % rpp,
    )


def page_records(body: Any, page: int) -> list[dict[str, Any]]:
    """Extract the result records of one page body.

    A body without a ``results`` list is logged and treated as an empty page.
    Entries that are not non-empty dicts are dropped.
    """
    results = body.get("results") if isinstance(body, dict) else None
    if not isinstance(results, list):
        logger.error("Doofinder empty results in response: page=%d response=%r", page, body)
        return []
    return [item for item in results if isinstance(item, dict) and item]


async def fetch_window(
    fetch_page: PageFetcher,
    offset: int,
    limit: int,
    max_page_size: int = MAX_PAGE_SIZE,
) -> WindowResult:
    """Fetch the provider pages covering a window and trim them to it.

    Args:
        fetch_page: Async callable taking a 1-indexed page number and the
            page size to request.
        offset: Global index of the first record to return.
        limit: Maximum number of records to return.
        max_page_size: Largest page size the provider accepts.

    Returns:
        The records in ``[offset, offset + limit)`` and the total reported
        by the last page fetched.
    """
    window = plan_window(offset, limit, max_page_size)
    records: list[dict[str, Any]] = []
    total = 0

    for page in window.pages:
        body = await fetch_page(page, window.rpp)
        total = (body.get("total") if isinstance(body, dict) else None) or 0
        records.extend(page_records(body, page))

    return WindowResult(
        results=records[window.skip_count : window.skip_count + limit],
        total_product_count=total,
    )
