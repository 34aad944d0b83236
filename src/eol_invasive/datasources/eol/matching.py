"""Matching searched names against a flattened collection."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

import numpy as np
import pandas as pd
from rapidfuzz import fuzz, process

from eol_invasive.schemas import DATASET_COLUMNS, MatchMode

#: Allowed edits as a fraction of the query length.
FUZZY_MAX_DISTANCE = 0.1

#: Minimum ``partial_ratio`` for a fuzzy hit, roughly one edit per ten characters.
FUZZY_SCORE_CUTOFF = 90.0


# =============================================================================
# Strategies: (query, candidates) -> positions
# =============================================================================


def exact_positions(query: str, candidates: Sequence[str]) -> set[int]:
    """Positions whose name contains ``query`` verbatim (case-sensitive)."""
    return {i for i, candidate in enumerate(candidates) if query in candidate}


def fuzzy_positions(query: str, candidates: Sequence[str]) -> set[int]:
    """
    Positions whose name approximately contains ``query``.

    A candidate must be long enough to hold the whole query, less the allowed
    edits; otherwise ``partial_ratio`` would align the candidate inside the
    query and a genus or a fragment would score as a hit.
    """
    min_length = len(query) - math.ceil(FUZZY_MAX_DISTANCE * len(query))
    choices = {i: c for i, c in enumerate(candidates) if len(c) >= min_length}
    hits = process.extract(
        query,
        choices,
        scorer=fuzz.partial_ratio,
        score_cutoff=FUZZY_SCORE_CUTOFF,
        limit=None,
    )
    return {index for _, _, index in hits}


STRATEGIES: dict[MatchMode, Callable[[str, Sequence[str]], set[int]]] = {
    MatchMode.EXACT: exact_positions,
    MatchMode.FUZZY: fuzzy_positions,
}


# =============================================================================
# Per-name matching
# =============================================================================


def match_name(name: str, dataset: pd.DataFrame, mode: MatchMode = MatchMode.EXACT) -> pd.DataFrame:
    """
    Rows of ``dataset`` matching ``name``.

    Matches come back in dataset order, one row each. When nothing matches a
    single row ``(name, NaN)`` is returned; NaN in ``object_id`` means the
    taxon is not on the list.
    """
    positions = sorted(STRATEGIES[mode](name, dataset["name"].tolist()))
    if not positions:
        return pd.DataFrame({"name": [name], "object_id": [np.nan]}, columns=DATASET_COLUMNS)
    return dataset.iloc[positions][DATASET_COLUMNS].reset_index(drop=True)


def match_names(
    names: Sequence[str],
    dataset: pd.DataFrame,
    mode: MatchMode = MatchMode.EXACT,
) -> list[tuple[str, pd.DataFrame]]:
    """Match each name in order, keeping duplicates, paired with its rows."""
    return [(name, match_name(name, dataset, mode)) for name in names]
