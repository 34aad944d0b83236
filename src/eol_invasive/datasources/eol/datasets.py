"""Invasive-species collections hosted by EOL and their collection IDs.

Datasets are not updated often; as of 2014-08-25 gisd100 was last touched
about six months earlier and the others about a year earlier.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from eol_invasive.errors import InvalidArgument


class Dataset(StrEnum):
    """Named invasive-species reference lists."""

    ALL = "all"
    GISD100 = "gisd100"
    GISD = "gisd"
    ISC = "isc"
    DAISIE = "daisie"
    I3N = "i3n"
    MINEPS = "mineps"

    @property
    def collection_id(self) -> int:
        """EOL collection ID for this dataset."""
        return COLLECTION_IDS[self]

    @property
    def title(self) -> str:
        """Human-readable name of the reference list."""
        return _DATASET_INFO[self][0]

    @property
    def url(self) -> str | None:
        """Reference page on eol.org, or None for the combined collection."""
        return _DATASET_INFO[self][1]


COLLECTION_IDS: dict[Dataset, int] = {
    Dataset.ALL: 55367,
    Dataset.GISD100: 54500,
    Dataset.GISD: 54983,
    Dataset.ISC: 55180,
    Dataset.DAISIE: 55179,
    Dataset.I3N: 55176,
    Dataset.MINEPS: 55331,
}

_DATASET_INFO: dict[Dataset, tuple[str, str | None]] = {
    Dataset.ALL: ("All datasets", None),
    Dataset.GISD100: (
        "100 of the World's Worst Invasive Alien Species (Global Invasive Species Database)",
        "https://eol.org/resources/477",
    ),
    Dataset.GISD: (
        "Global Invasive Species Database 2013",
        "https://eol.org/collections/54983",
    ),
    Dataset.ISC: (
        "CABI Invasive Species Compendium (ISC)",
        "https://eol.org/collections/55180",
    ),
    Dataset.DAISIE: (
        "Delivering Alien Invasive Species Inventories for Europe (DAISIE) Species List",
        "https://eol.org/collections/55179",
    ),
    Dataset.I3N: (
        "IABIN Invasives Information Network (I3N) Species",
        "https://eol.org/collections/55176",
    ),
    Dataset.MINEPS: (
        "Marine Invaders of the NE Pacific Species",
        "https://eol.org/collections/55331",
    ),
}


def parse_dataset(selector: Dataset | str | None) -> Dataset:
    """Coerce a selector string to a ``Dataset``.

    Raises:
        InvalidArgument: If ``selector`` is not one of the known datasets.
    """
    if selector is None:
        raise InvalidArgument("please provide a dataset name")
    try:
        return Dataset(selector)
    except ValueError:
        known = ", ".join(d.value for d in Dataset)
        raise InvalidArgument(f"no dataset matched {selector!r} (expected one of: {known})") from None


def resolve_dataset(selector: Dataset | str | None) -> int:
    """Map a dataset selector to its EOL collection ID. No network access."""
    return parse_dataset(selector).collection_id


def describe_datasets() -> list[dict[str, Any]]:
    """List every dataset with its collection ID, title and reference URL."""
    return [
        {
            "dataset": d.value,
            "collection_id": d.collection_id,
            "title": d.title,
            "url": d.url,
        }
        for d in Dataset
    ]
