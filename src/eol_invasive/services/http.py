"""
Shared HTTP client with a default timeout and connection-level retries.

Provides a pre-configured ``requests.Session`` used by every datasource.
Only failed connection attempts are retried; an HTTP error status is handed
back to the caller untouched so a failing page ends the fetch.

Usage::

    from eol_invasive.services.http import session

    resp = session.get("https://eol.org/api/collections/1.0/55367.json", timeout=30)
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: Default retry strategy: reconnect on dropped sockets, never on a status code.
DEFAULT_RETRY = Retry(
    total=3,
    connect=3,
    read=0,
    status=0,
    backoff_factor=1,  # 0s, 1s, 2s between reconnects
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = "eol-invasive/0.1 (+https://eol.org/docs/what-is-eol/data-services)"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    # ``Session.request`` forwards ``timeout=None`` when the caller omits it.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session — import and use directly.
session: requests.Session = create_session()
