"""
Domain models for the EOL invasive-species client.

Pydantic models for the collections API payload plus the enumerations the
public functions accept. API responses are validated into these models and
everything the client does not use is dropped on the way in.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Table columns
# =============================================================================

#: Columns of a flattened collection.
DATASET_COLUMNS = ["name", "object_id"]

#: Columns of an assembled search result, in order.
RESULT_COLUMNS = ["searched_name", "name", "eol_object_id", "db"]


# =============================================================================
# Collections API
# =============================================================================


class CollectionItem(BaseModel):
    """One taxon entry of a collection. Only ``name`` and ``object_id`` are kept."""

    model_config = ConfigDict(extra="ignore")

    name: str
    object_id: int | str


class CollectionPage(BaseModel):
    """A single page returned by ``/api/collections/1.0/{id}.json``."""

    model_config = ConfigDict(extra="ignore")

    total_items: int = Field(..., ge=0)
    collection_items: list[CollectionItem] = Field(default_factory=list)


# =============================================================================
# Matching
# =============================================================================


class MatchMode(StrEnum):
    """How searched names are compared against collection names."""

    EXACT = "exact"
    FUZZY = "fuzzy"

    @classmethod
    def _missing_(cls, value: object) -> MatchMode | None:
        # ``grep``/``agrep`` are the names these modes went by historically.
        aliases = {"grep": cls.EXACT, "agrep": cls.FUZZY}
        if isinstance(value, str):
            return aliases.get(value.lower())
        return None
