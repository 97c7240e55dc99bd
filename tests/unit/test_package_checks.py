r"""Unit tests for the post-install package checks."""

from __future__ import annotations

import logging
from unittest.mock import Mock

import httpx
import package_checks
import pytest


def test_check_run_success(mock_sleep: Mock, monkeypatch: pytest.MonkeyPatch) -> None:
    response = httpx.Response(200, request=httpx.Request("GET", "https://httpbin.org/get"))
    get = Mock(return_value=response)
    monkeypatch.setattr(httpx, "get", get)
    package_checks.check_run()
    get.assert_called_once_with("https://httpbin.org/get", timeout=10.0)
    mock_sleep.assert_not_called()


def test_check_run_unreachable_host(
    mock_sleep: Mock, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that an unreachable httpbin.org is reported, not raised."""
    get = Mock(side_effect=httpx.ConnectError("Name or service not known"))
    monkeypatch.setattr(httpx, "get", get)
    with caplog.at_level(logging.WARNING):
        package_checks.check_run()
    assert get.call_count == 4
    assert mock_sleep.call_count == 3
    assert "https://httpbin.org is unreachable" in caplog.text
    assert "ConnectError: Name or service not known" in caplog.text


def test_check_run_http_error_propagates(
    mock_sleep: Mock, monkeypatch: pytest.MonkeyPatch
) -> None:
    response = httpx.Response(503, request=httpx.Request("GET", "https://httpbin.org/get"))
    monkeypatch.setattr(httpx, "get", Mock(return_value=response))
    with pytest.raises(httpx.HTTPStatusError):
        package_checks.check_run()
