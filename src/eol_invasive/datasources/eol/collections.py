"""Paginated collection fetching and flattening."""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Iterable, Iterator
from typing import Any

import pandas as pd

from eol_invasive.datasources.eol import client
from eol_invasive.datasources.eol.datasets import Dataset
from eol_invasive.errors import InvalidArgument
from eol_invasive.schemas import DATASET_COLUMNS, CollectionPage

logger = logging.getLogger(__name__)


# =============================================================================
# Pagination
# =============================================================================


def pages_remaining(total_items: int, received: int, per_page: int) -> range:
    """
    Page numbers still to fetch after the first response.

    Follow-up pages are numbered from 2 and cover whatever the first page
    did not return: ``ceil((total_items - received) / per_page)`` of them.
    """
    if received >= total_items:
        return range(0)
    count = math.ceil((total_items - received) / per_page)
    return range(2, 2 + count)


def iter_collection_pages(
    collection_id: int,
    *,
    page: int | None = None,
    per_page: int = client.DEFAULT_PER_PAGE,
    key: str | None = None,
    verbose: bool = False,
    base_url: str = client.API_BASE,
    **request_kwargs: Any,
) -> Iterator[CollectionPage]:
    """
    Lazily yield every page of a collection, one blocking request at a time.

    The first page decides how many more are requested. A failing page raises
    ``RemoteRequestFailed`` from the generator and no further pages are fetched.

    Args:
        collection_id: EOL collection ID.
        page: Starting page for the first request (server default when None).
        per_page: Items per page.
        key: Optional API key, passed through.
        verbose: Print the "Getting data for N names..." notice to stderr.
        base_url: EOL host.
        **request_kwargs: Forwarded to ``requests``.
    """
    if isinstance(per_page, bool) or not isinstance(per_page, int) or per_page < 1:
        raise InvalidArgument(f"per_page must be a positive integer, got {per_page!r}")
    if page is not None and (isinstance(page, bool) or not isinstance(page, int) or page < 1):
        raise InvalidArgument(f"page must be a positive integer, got {page!r}")

    first = client.get_collection_page(
        collection_id,
        page=page,
        per_page=per_page,
        key=key,
        base_url=base_url,
        **request_kwargs,
    )
    if verbose:
        print(f"Getting data for {first.total_items} names...", file=sys.stderr)
    yield first

    remaining = pages_remaining(first.total_items, len(first.collection_items), per_page)
    logger.debug(
        "Collection %s: %d items reported, %d received, %d more pages",
        collection_id,
        first.total_items,
        len(first.collection_items),
        len(remaining),
    )
    for page_number in remaining:
        yield client.get_collection_page(
            collection_id,
            page=page_number,
            per_page=per_page,
            key=key,
            base_url=base_url,
            **request_kwargs,
        )


def flatten_pages(pages: Iterable[CollectionPage]) -> pd.DataFrame:
    """Concatenate page items, in order, into a ``name``/``object_id`` table."""
    records = [item.model_dump() for p in pages for item in p.collection_items]
    return pd.DataFrame(records, columns=DATASET_COLUMNS)


# =============================================================================
# Public fetchers
# =============================================================================


def fetch_collection(
    collection_id: int,
    *,
    page: int | None = None,
    per_page: int = client.DEFAULT_PER_PAGE,
    key: str | None = None,
    verbose: bool = False,
    base_url: str = client.API_BASE,
    **request_kwargs: Any,
) -> pd.DataFrame:
    """
    Fetch every item of a collection as one flattened table.

    Returns:
        DataFrame with columns ``name`` and ``object_id`` in fetch order.

    Raises:
        InvalidArgument: If ``page`` or ``per_page`` is not a positive integer.
        RemoteRequestFailed: If any page fails; nothing partial is returned.
    """
    pages = iter_collection_pages(
        collection_id,
        page=page,
        per_page=per_page,
        key=key,
        verbose=verbose,
        base_url=base_url,
        **request_kwargs,
    )
    dataset = flatten_pages(pages)
    logger.debug("Collection %s flattened to %d rows", collection_id, len(dataset))
    return dataset


def fetch_all_invasive(
    *,
    per_page: int = client.DEFAULT_PER_PAGE,
    key: str | None = None,
    base_url: str = client.API_BASE,
    **request_kwargs: Any,
) -> pd.DataFrame:
    """Fetch the combined "all datasets" collection, always announcing progress."""
    return fetch_collection(
        Dataset.ALL.collection_id,
        per_page=per_page,
        key=key,
        verbose=True,
        base_url=base_url,
        **request_kwargs,
    )
