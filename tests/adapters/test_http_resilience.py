from __future__ import annotations

import asyncio

import httpx

from aclbind.adapters.http_resilience import ResilientClient
from aclbind.config import RateLimit, ResilienceConfig, RetryPolicy


def test_resilient_client_sends_default_headers_and_base_url() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    config = ResilienceConfig(
        name="test",
        base_url="http://consul.test:8500",
        retry=RetryPolicy(connect_retries=0),
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        default_headers={"X-Consul-Token": "t"},
    )

    async def run() -> httpx.Response:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return await client.request("PUT", "/v1/acl/binding-rule/abc", json={"ID": "abc"})

    response = asyncio.run(run())

    assert response.json() == {"ok": True}
    assert seen[0].method == "PUT"
    assert str(seen[0].url) == "http://consul.test:8500/v1/acl/binding-rule/abc"
    assert seen[0].headers["X-Consul-Token"] == "t"
