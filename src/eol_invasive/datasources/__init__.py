"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, single-request helpers
    └── {feature}.py      # Fetch/processing functions (one per concept)

Fetch functions go through the shared session and raise package errors::

    from eol_invasive.services.http import session

    def fetch_something(...) -> dict[str, Any]:
        resp = session.get(API_URL, params={...})
        ...

Currently: ``eol/`` (Encyclopedia of Life invasive-species collections).
"""
