"""Tests for liveness checks."""

from __future__ import annotations

import httpx

from zeppctl.install.liveness import AssumeStopped, HttpLivenessCheck, LivenessCheck


class TestAssumeStopped:
    async def test_always_false(self) -> None:
        assert await AssumeStopped().is_running() is False

    def test_satisfies_protocol(self) -> None:
        assert isinstance(AssumeStopped(), LivenessCheck)


class TestHttpLivenessCheck:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(HttpLivenessCheck("http://localhost:8080"), LivenessCheck)

    def test_url(self) -> None:
        check = HttpLivenessCheck("http://localhost:8080/")
        assert check.url == "http://localhost:8080/api/version"

    async def test_running_on_success(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json={"status": "OK", "body": {"version": "0.9.0"}})

        check = HttpLivenessCheck("http://zeppelin:8080", transport=httpx.MockTransport(handler))

        assert await check.is_running() is True
        assert seen == ["http://zeppelin:8080/api/version"]

    async def test_not_running_on_error_status(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(503))
        check = HttpLivenessCheck("http://zeppelin:8080", transport=transport)
        assert await check.is_running() is False

    async def test_not_running_when_unreachable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        check = HttpLivenessCheck("http://zeppelin:8080", transport=httpx.MockTransport(handler))
        assert await check.is_running() is False
