"""
Invasive-species lookups against Encyclopedia of Life collections.

Two entry points:
1. ``search`` - check names against one of the invasive datasets
2. ``invasive_data`` - the whole "all datasets" table, no matching

A NaN ``eol_object_id`` in a search result means the taxon is not on the list
in question; a found taxon carries its EOL identifier.

Note that ``dataset="all"`` can give surprising results: EOL does not say which
of the narrower lists a taxon came from, and a taxon listed in e.g. ``gisd`` is
sometimes missing from ``all``.

API docs: https://eol.org/docs/what-is-eol/data-services
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

import pandas as pd

from eol_invasive.config import Settings, get_settings
from eol_invasive.datasources.eol import (
    Dataset,
    assemble_results,
    count_matches,
    fetch_all_invasive,
    fetch_collection,
    match_names,
    parse_dataset,
)
from eol_invasive.errors import InvalidArgument
from eol_invasive.schemas import MatchMode

# =============================================================================
# Argument checks (all run before any request)
# =============================================================================


def _normalize_names(name: str | Sequence[str]) -> list[str]:
    if isinstance(name, str):
        names = [name]
    elif isinstance(name, Iterable):
        names = list(name)
    else:
        raise InvalidArgument(f"'name' must be a name or a sequence of names, got {name!r}")
    if not names:
        raise InvalidArgument("'name' must contain at least one name")
    for n in names:
        if not isinstance(n, str) or len(n) < 1:
            raise InvalidArgument("'name' must be longer than 0 characters")
    return names


def _parse_match_mode(match_mode: MatchMode | str) -> MatchMode:
    try:
        return MatchMode(match_mode)
    except ValueError:
        raise InvalidArgument(f"unknown match mode {match_mode!r} (expected 'exact' or 'fuzzy')") from None


def _request_options(settings: Settings, request_kwargs: dict[str, Any]) -> dict[str, Any]:
    options = dict(request_kwargs)
    options.setdefault("timeout", settings.timeout)
    return options


# =============================================================================
# Public API
# =============================================================================


def search(
    name: str | Sequence[str],
    dataset: Dataset | str = Dataset.ALL,
    match_mode: MatchMode | str = MatchMode.EXACT,
    *,
    page: int | None = None,
    per_page: int | None = None,
    key: str | None = None,
    verbose: bool = True,
    count: bool = False,
    settings: Settings | None = None,
    **request_kwargs: Any,
) -> pd.DataFrame | int:
    """
    Search for taxonomic names in an EOL invasive-species dataset.

    The whole collection is downloaded (the API cannot filter by name) and
    each name is matched against it.

    Args:
        name: A taxon name or a sequence of names; order and repeats are kept.
        dataset: One of all, gisd100, gisd, isc, daisie, i3n, mineps.
        match_mode: ``"exact"`` (substring) or ``"fuzzy"`` (approximate).
        page: Starting page for the first request.
        per_page: Items per request (defaults to ``settings.per_page``).
        key: EOL API key; defaults to ``settings.api_key``.
        verbose: Print how many names are being fetched.
        count: Return the number of found matches instead of the table.
        settings: Explicit settings; read from the environment when None.
        **request_kwargs: Forwarded to ``requests`` (``timeout``, ``headers``, ...).

    Returns:
        DataFrame with ``searched_name``, ``name``, ``eol_object_id``, ``db``
        columns, or an int when ``count`` is True.

    Raises:
        InvalidArgument: Empty names, unknown dataset or match mode.
        RemoteRequestFailed: Any page request failed.

    Example::

        search(["Lymantria dispar", "Cygnus olor", "Pinus concolor"], dataset="gisd")
    """
    names = _normalize_names(name)
    selected = parse_dataset(dataset)
    mode = _parse_match_mode(match_mode)

    settings = settings or get_settings()
    collection = fetch_collection(
        selected.collection_id,
        page=page,
        per_page=per_page if per_page is not None else settings.per_page,
        key=key if key is not None else settings.api_key,
        verbose=verbose,
        base_url=settings.base_url,
        **_request_options(settings, request_kwargs),
    )

    results = assemble_results(match_names(names, collection, mode), selected.value)
    if count:
        return count_matches(results)
    return results


def invasive_data(settings: Settings | None = None, **request_kwargs: Any) -> pd.DataFrame:
    """
    Download the entire "all datasets" invasive table.

    Returns:
        DataFrame with ``name`` and ``object_id`` columns for every listed taxon.

    Raises:
        RemoteRequestFailed: Any page request failed.
    """
    settings = settings or get_settings()
    return fetch_all_invasive(
        per_page=settings.per_page,
        key=settings.api_key,
        base_url=settings.base_url,
        **_request_options(settings, request_kwargs),
    )
