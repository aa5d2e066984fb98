from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from aclbind.adapters.http_resilience import ResilientClient
from aclbind.config import ConsulConfig, ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture(autouse=True)
def _clear_consul_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CONSUL_HTTP_ADDR", "CONSUL_HTTP_TOKEN", "CONSUL_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def consul_config() -> ConsulConfig:
    return ConsulConfig(
        address="http://consul.test:8500",
        token="secret-token",
        resilience=ResilienceConfig(
            name="consul",
            base_url="http://consul.test:8500",
            timeout_seconds=5.0,
            retry=RetryPolicy(connect_retries=0),
            default_headers={"X-Consul-Token": "secret-token"},
        ),
    )


@pytest.fixture
def make_client_factory() -> Callable[
    [Callable[[httpx.Request], httpx.Response]],
    Callable[[ResilienceConfig], ResilientClient],
]:
    def build(
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> Callable[[ResilienceConfig], ResilientClient]:
        def factory(resilience: ResilienceConfig) -> ResilientClient:
            return ResilientClient(resilience, transport=httpx.MockTransport(handler))

        return factory

    return build
