"""EOL Invasive - check taxon names against Encyclopedia of Life invasive-species lists.

Architecture::

    datasources/eol/   Collections API client, pagination, matching, result shaping
    invasive.py        Public entry points (search, invasive_data)
    config.py          Settings from EOL_* environment variables / .env
    schemas.py         Pydantic payload models, match modes, table columns
    errors.py          InvalidArgument, RemoteRequestFailed
    services/          Shared HTTP session

Data flow: dataset selector -> collection ID -> pages -> flattened table ->
per-name matches -> assembled result (or count).
"""

__version__ = "0.1.0"

from eol_invasive.config import Settings, get_settings
from eol_invasive.datasources.eol import Dataset, describe_datasets, resolve_dataset
from eol_invasive.errors import EolError, InvalidArgument, RemoteRequestFailed
from eol_invasive.invasive import invasive_data, search
from eol_invasive.schemas import MatchMode

__all__ = [
    "Dataset",
    "EolError",
    "InvalidArgument",
    "MatchMode",
    "RemoteRequestFailed",
    "Settings",
    "__version__",
    "describe_datasets",
    "get_settings",
    "invasive_data",
    "resolve_dataset",
    "search",
]
