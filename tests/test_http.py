"""Tests for the shared HTTP client with retry logic."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests
from urllib3.util.retry import Retry

from gsl_migration.services.http import (
    DEFAULT_RETRY,
    DEFAULT_TIMEOUT,
    create_session,
    get_checked,
    session,
)


class TestDefaultRetry:
    """Verify retry strategy configuration."""

    def test_total_retries(self) -> None:
        assert DEFAULT_RETRY.total == 3

    def test_retries_on_server_errors_and_rate_limit(self) -> None:
        for status in (429, 502, 503, 504):
            assert status in DEFAULT_RETRY.status_forcelist

    def test_only_safe_methods(self) -> None:
        allowed = DEFAULT_RETRY.allowed_methods
        assert "GET" in allowed
        assert "POST" not in allowed


class TestCreateSession:
    """Verify session factory."""

    def test_adapter_has_retry(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)
        assert adapter.max_retries.total == 3

    def test_custom_retry(self) -> None:
        s = create_session(retry=Retry(total=7))
        assert s.get_adapter("http://example.com").max_retries.total == 7

    def test_user_agent_header(self) -> None:
        assert "gsl-migration" in create_session().headers["User-Agent"]

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=5)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 5


class TestGetChecked:
    """GET with status check."""

    def test_returns_response(self) -> None:
        http = MagicMock()
        resp = http.get.return_value
        assert get_checked("https://example.org/a.json", http=http) is resp
        http.get.assert_called_once_with("https://example.org/a.json")
        resp.raise_for_status.assert_called_once()

    def test_raises_on_error_status(self) -> None:
        http = MagicMock()
        http.get.return_value.raise_for_status.side_effect = requests.HTTPError("503")
        with pytest.raises(requests.HTTPError):
            get_checked("https://example.org/a.json", http=http)


class TestModuleSession:
    def test_session_is_configured(self) -> None:
        assert session.get_adapter("https://example.com").max_retries.total == 3

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 20
