from __future__ import annotations

import asyncio

import httpx

from citypop.adapters.http_resilience import RateLimit, ResilienceConfig, ResilientClient


def test_client_applies_default_headers_and_timeout() -> None:
    config = ResilienceConfig(
        name="demo",
        timeout_seconds=12.5,
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        default_headers={"User-Agent": "demo-agent"},
    )
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    async def scenario() -> httpx.Response:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return await client.get("https://example.org/sparql", params={"format": "json"})

    response = asyncio.run(scenario())

    assert response.json() == {"ok": True}
    assert seen[0].headers["User-Agent"] == "demo-agent"
    assert seen[0].url.params["format"] == "json"
    assert seen[0].extensions["timeout"]["read"] == 12.5


def test_failed_request_is_not_retried() -> None:
    config = ResilienceConfig(name="demo")
    attempts: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(request)
        return httpx.Response(503)

    async def scenario() -> httpx.Response:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return await client.post("https://example.org/api", data={"data": "q"})

    response = asyncio.run(scenario())

    assert response.status_code == 503
    assert len(attempts) == 1
