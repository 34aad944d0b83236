"""
EOL collections API client.

Low-level HTTP for ``/api/collections/1.0/{collection_id}.json``: builds the
query, performs one GET through the shared session and validates the payload
into a ``CollectionPage``.

The endpoint has no parameter for searching by taxon name, so a lookup always
pulls the whole collection. Large collections can take 30 seconds to a minute.
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from eol_invasive.errors import RemoteRequestFailed
from eol_invasive.schemas import CollectionPage
from eol_invasive.services.http import session

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
API_BASE = "https://eol.org"
COLLECTION_PATH = "/api/collections/1.0/{collection_id}.json"
DEFAULT_PER_PAGE = 500
TAXA_FILTER = "taxa"


def collection_url(collection_id: int, base_url: str = API_BASE) -> str:
    """Absolute URL of a collection's JSON endpoint."""
    return base_url.rstrip("/") + COLLECTION_PATH.format(collection_id=collection_id)


def build_params(
    *,
    page: int | None = None,
    per_page: int = DEFAULT_PER_PAGE,
    key: str | None = None,
) -> dict[str, Any]:
    """Query parameters for a collection request; ``page``/``key`` only when set."""
    params: dict[str, Any] = {"per_page": per_page, "filter": TAXA_FILTER}
    if page is not None:
        params["page"] = page
    if key:
        params["key"] = key
    return params


def get_collection_page(
    collection_id: int,
    *,
    page: int | None = None,
    per_page: int = DEFAULT_PER_PAGE,
    key: str | None = None,
    base_url: str = API_BASE,
    **request_kwargs: Any,
) -> CollectionPage:
    """
    GET one page of a collection.

    Args:
        collection_id: EOL collection ID.
        page: Page number; omitted from the query when None (server default 1).
        per_page: Items per page.
        key: Optional API key, passed through unvalidated.
        base_url: EOL host.
        **request_kwargs: Forwarded to ``requests`` (``timeout``, ``headers``, ...).

    Returns:
        The validated page.

    Raises:
        RemoteRequestFailed: On a transport error, a non-2xx status or a body
            that is not a valid collection page.
    """
    page_number = page if page is not None else 1
    url = collection_url(collection_id, base_url)
    params = build_params(page=page, per_page=per_page, key=key)
    logger.debug("GET %s page=%s per_page=%s", url, page_number, per_page)

    try:
        resp = session.get(url, params=params, **request_kwargs)
    except requests.RequestException as exc:
        raise RemoteRequestFailed(None, page_number, str(exc)) from exc

    if not 200 <= resp.status_code < 300:
        raise RemoteRequestFailed(resp.status_code, page_number, resp.reason or "")

    try:
        return CollectionPage.model_validate(resp.json())
    except (ValueError, ValidationError) as exc:
        raise RemoteRequestFailed(resp.status_code, page_number, "malformed collection page") from exc
