"""Liveness checks — answer "is the Zeppelin daemon running right now?"."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)


@runtime_checkable
class LivenessCheck(Protocol):
    """Reports whether the managed Zeppelin daemon is currently active."""

    async def is_running(self) -> bool:
        """Return ``True`` if the daemon is up."""
        ...


class AssumeStopped:
    """Never probes anything and always reports the daemon as stopped.

    With this check ``stop`` never invokes the daemon script and ``clean``
    deletes the install without stopping it first.  Use
    :class:`HttpLivenessCheck` when a real answer is needed.
    """

    async def is_running(self) -> bool:
        logger.debug("Liveness not probed; assuming Zeppelin is stopped")
        return False


class HttpLivenessCheck:
    """Treats Zeppelin as running when ``GET /api/version`` succeeds."""

    def __init__(
        self,
        zeppelin_url: str,
        *,
        timeout: float = 3.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = zeppelin_url.rstrip("/") + "/api/version"
        self._timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def is_running(self) -> bool:
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.get(self._url)
        except httpx.HTTPError as exc:
            logger.debug("Zeppelin not reachable at %s: %s", self._url, exc)
            return False
        return response.status_code < 300
