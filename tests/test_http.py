"""Tests for the shared HTTP client."""

from __future__ import annotations

from unittest.mock import patch

import requests
from urllib3.util.retry import Retry

from eol_invasive.services.http import DEFAULT_RETRY, DEFAULT_TIMEOUT, create_session, session


class TestDefaultRetry:
    """Verify retry strategy configuration."""

    def test_retries_connection_errors(self) -> None:
        assert DEFAULT_RETRY.connect == 3

    def test_never_retries_on_status(self) -> None:
        assert DEFAULT_RETRY.status == 0
        assert not DEFAULT_RETRY.status_forcelist

    def test_no_read_retries(self) -> None:
        assert DEFAULT_RETRY.read == 0

    def test_only_safe_methods(self) -> None:
        allowed = DEFAULT_RETRY.allowed_methods
        assert "GET" in allowed
        assert "POST" not in allowed


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        s = create_session()
        assert isinstance(s, requests.Session)

    def test_mounts_https_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://eol.org")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_mounts_http_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("http://eol.org")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_custom_retry(self) -> None:
        custom = Retry(total=10, backoff_factor=1)
        s = create_session(retry=custom)
        adapter = s.get_adapter("https://eol.org")
        assert adapter.max_retries.total == 10

    def test_user_agent_header(self) -> None:
        s = create_session()
        assert "eol-invasive" in s.headers["User-Agent"]

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://eol.org").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_none_timeout_replaced(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://eol.org").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=None)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://eol.org").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=99)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 99


class TestModuleSession:
    """Verify the module-level singleton."""

    def test_session_is_configured(self) -> None:
        adapter = session.get_adapter("https://eol.org")
        assert adapter.max_retries.connect == 3

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 30
