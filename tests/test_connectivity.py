"""Tests for connectivity signals."""

import asyncio
from typing import Any

import httpx
import pytest

from newsdesk.connectivity import ConnectivityFlag, ConnectivityMonitor


def test_flag_defaults_to_connected() -> None:
    assert ConnectivityFlag().is_connected is True


def test_flag_can_be_updated() -> None:
    flag = ConnectivityFlag(connected=False)
    assert flag.is_connected is False
    flag.set(True)
    assert flag.is_connected is True
    flag.set(False)
    assert flag.is_connected is False


class TestConnectivityMonitor:
    async def test_check_success(self, monkeypatch: pytest.MonkeyPatch) -> None:
        probed: list[str] = []

        async def mock_head(self: Any, url: str, **kwargs: Any) -> httpx.Response:
            probed.append(url)
            return httpx.Response(405)

        monkeypatch.setattr(httpx.AsyncClient, "head", mock_head)
        monitor = ConnectivityMonitor(probe_url="https://probe.example")
        monitor.set(False)

        assert await monitor.check() is True
        assert monitor.is_connected is True
        assert probed == ["https://probe.example"]

    async def test_check_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        async def mock_head(self: Any, url: str, **kwargs: Any) -> httpx.Response:
            raise httpx.ConnectError("unreachable")

        monkeypatch.setattr(httpx.AsyncClient, "head", mock_head)
        monitor = ConnectivityMonitor()

        assert await monitor.check() is False
        assert monitor.is_connected is False

    async def test_background_probing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = 0

        async def mock_head(self: Any, url: str, **kwargs: Any) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(200)

        monkeypatch.setattr(httpx.AsyncClient, "head", mock_head)
        monitor = ConnectivityMonitor(interval=0.01)

        monitor.start()
        await asyncio.sleep(0.05)
        await monitor.stop()

        assert calls >= 2
        assert monitor.is_connected is True

    async def test_stop_without_start(self) -> None:
        await ConnectivityMonitor().stop()
