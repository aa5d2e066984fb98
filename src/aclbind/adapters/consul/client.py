"""HTTP client for the Consul ACL binding rule endpoints."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from aclbind.adapters.http_resilience import ResilientClient
from aclbind.config.consul import get_consul_config
from aclbind.domain.ports.acl import BindingRuleClient

from .schema import BindingRulePayload, BindingRuleSummary
from .translator import binding_rule_to_payload, parse_binding_rule

if TYPE_CHECKING:
    from collections.abc import Callable

    from aclbind.config.consul import ConsulConfig
    from aclbind.config.http_resilience import ResilienceConfig
    from aclbind.domain.model import BindingRule

log = getLogger(__name__)

BINDING_RULES_PATH = "/v1/acl/binding-rules"
BINDING_RULE_PATH = "/v1/acl/binding-rule"

_summaries_adapter: TypeAdapter[list[BindingRuleSummary] | None] = TypeAdapter(
    list[BindingRuleSummary] | None
)


class ConsulAPIError(RuntimeError):
    """Raised when the Consul API answers with an error status or an unusable payload."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConsulACLClient:
    """Blocking facade over the async Consul ACL API."""

    def __init__(
        self,
        *,
        config: ConsulConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config or get_consul_config()
        self._resilience = self._config.resilience
        self._client_factory = client_factory or ResilientClient

    def list_binding_rule_ids(self) -> list[str]:
        return asyncio.run(self._list_binding_rule_ids_async())

    def read_binding_rule(self, rule_id: str) -> BindingRule | None:
        return asyncio.run(self._read_binding_rule_async(rule_id))

    def update_binding_rule(self, rule: BindingRule) -> BindingRule:
        return asyncio.run(self._update_binding_rule_async(rule))

    async def _list_binding_rule_ids_async(self) -> list[str]:
        async with self._client_factory(self._resilience) as client:
            response = await self._perform_request(
                client=client,
                method="GET",
                path=BINDING_RULES_PATH,
            )
        try:
            summaries = _summaries_adapter.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            raise ConsulAPIError(f"Unexpected binding rule listing payload: {exc}") from exc
        ids = [summary.id for summary in summaries or ()]
        log.debug("Listed %s binding rules", len(ids))
        return ids

    async def _read_binding_rule_async(self, rule_id: str) -> BindingRule | None:
        async with self._client_factory(self._resilience) as client:
            response = await self._perform_request(
                client=client,
                method="GET",
                path=_rule_path(rule_id),
                allow_not_found=True,
            )
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        return self._parse_rule(response)

    async def _update_binding_rule_async(self, rule: BindingRule) -> BindingRule:
        async with self._client_factory(self._resilience) as client:
            response = await self._perform_request(
                client=client,
                method="PUT",
                path=_rule_path(rule.id),
                json=binding_rule_to_payload(rule),
            )
        return self._parse_rule(response)

    async def _perform_request(
        self,
        *,
        client: ResilientClient,
        method: str,
        path: str,
        json: object = None,
        allow_not_found: bool = False,
    ) -> httpx.Response:
        url = f"{self._config.address}{path}"
        response = await client.request(method, url, json=json)

        if allow_not_found and response.status_code == httpx.codes.NOT_FOUND:
            return response
        if response.status_code >= httpx.codes.BAD_REQUEST:
            body = response.text.strip()
            log.debug("Consul %s %s failed with %s: %s", method, path, response.status_code, body)
            raise ConsulAPIError(
                f"Unexpected response code: {response.status_code} ({body})",
                status_code=response.status_code,
            )
        return response

    def _parse_rule(self, response: httpx.Response) -> BindingRule:
        try:
            payload = BindingRulePayload.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise ConsulAPIError(f"Unexpected binding rule payload: {exc}") from exc
        return parse_binding_rule(payload)


def _rule_path(rule_id: str) -> str:
    return f"{BINDING_RULE_PATH}/{quote(rule_id, safe='')}"


def build_consul_client(
    *,
    address: str | None = None,
    token: str | None = None,
) -> ConsulACLClient:
    """Create a client from the environment, with optional explicit overrides."""

    return ConsulACLClient(config=get_consul_config(address=address, token=token))


if TYPE_CHECKING:
    _client_check: BindingRuleClient = ConsulACLClient()
