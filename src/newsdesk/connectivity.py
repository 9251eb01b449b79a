"""Connectivity signal and a reachability monitor that keeps it current."""

import asyncio
import logging
import threading
from typing import Protocol

import httpx

logger = logging.getLogger(__name__)

DEFAULT_PROBE_URL = "https://newsapi.org"


class ConnectivitySignal(Protocol):
    """Read-only view of network reachability."""

    @property
    def is_connected(self) -> bool:
        """Whether the network is currently considered reachable."""
        ...


class ConnectivityFlag:
    """Process-wide boolean flag, safe to update from any thread.

    Args:
        connected: Initial value.
    """

    def __init__(self, connected: bool = True) -> None:
        self._event = threading.Event()
        self.set(connected)

    @property
    def is_connected(self) -> bool:
        return self._event.is_set()

    def set(self, connected: bool) -> None:
        if connected:
            self._event.set()
        else:
            self._event.clear()


class ConnectivityMonitor(ConnectivityFlag):
    """Flag that is refreshed by periodically probing a URL.

    Any HTTP response counts as reachable; only transport failures flip the
    flag to ``False``.

    Args:
        probe_url: URL requested on each check.
        interval: Seconds between checks when running in the background.
        timeout: Timeout for a single probe.
    """

    def __init__(
        self,
        *,
        probe_url: str = DEFAULT_PROBE_URL,
        interval: float = 30.0,
        timeout: float = 5.0,
    ) -> None:
        super().__init__(connected=True)
        self._probe_url = probe_url
        self._interval = interval
        self._timeout = timeout
        self._task: asyncio.Task[None] | None = None

    async def check(self) -> bool:
        """Probe once and update the flag."""
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                await client.head(self._probe_url)
            connected = True
        except httpx.HTTPError as e:
            logger.debug(f"Connectivity probe failed: {e}")
            connected = False

        if connected != self.is_connected:
            logger.info(f"Network {'reachable' if connected else 'unreachable'}")
        self.set(connected)
        return connected

    async def _run(self) -> None:
        while True:
            await self.check()
            await asyncio.sleep(self._interval)

    def start(self) -> None:
        """Start probing in the background on the running event loop."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Stop background probing."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
