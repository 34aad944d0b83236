"""Encyclopedia of Life invasive-species collections.

Public API:
  - client: Low-level HTTP for one collection page
  - datasets: Dataset, resolve_dataset, describe_datasets
  - collections: iter_collection_pages, fetch_collection, fetch_all_invasive
  - matching: exact/fuzzy strategies, match_name, match_names
  - results: assemble_results, count_matches

Known upstream quirk: ``Dataset.ALL`` does not reliably contain every taxon
listed in the narrower datasets (a name found in ``gisd`` may be missing from
``all``). EOL records no per-taxon source list, so this cannot be checked here.
"""

from eol_invasive.datasources.eol.client import API_BASE, DEFAULT_PER_PAGE, get_collection_page
from eol_invasive.datasources.eol.collections import (
    fetch_all_invasive,
    fetch_collection,
    flatten_pages,
    iter_collection_pages,
    pages_remaining,
)
from eol_invasive.datasources.eol.datasets import (
    COLLECTION_IDS,
    Dataset,
    describe_datasets,
    parse_dataset,
    resolve_dataset,
)
from eol_invasive.datasources.eol.matching import (
    STRATEGIES,
    exact_positions,
    fuzzy_positions,
    match_name,
    match_names,
)
from eol_invasive.datasources.eol.results import assemble_results, count_matches

__all__ = [
    "API_BASE",
    "COLLECTION_IDS",
    "DEFAULT_PER_PAGE",
    "STRATEGIES",
    "Dataset",
    "assemble_results",
    "count_matches",
    "describe_datasets",
    "exact_positions",
    "fetch_all_invasive",
    "fetch_collection",
    "flatten_pages",
    "fuzzy_positions",
    "get_collection_page",
    "iter_collection_pages",
    "match_name",
    "match_names",
    "pages_remaining",
    "parse_dataset",
    "resolve_dataset",
]
