"""Translate between Consul binding rule payloads and domain rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from aclbind.domain.model import BindingRule, RuleMeta, coerce_role_bind_type

from .schema import BindingRulePayload

if TYPE_CHECKING:
    from collections.abc import Mapping


def parse_binding_rule(payload: Mapping[str, object] | BindingRulePayload) -> BindingRule:
    """Build a domain ``BindingRule`` from a validated or raw API payload."""

    model = (
        payload
        if isinstance(payload, BindingRulePayload)
        else BindingRulePayload.model_validate(payload)
    )
    return BindingRule(
        id=model.id,
        provider_ref=model.idp_name,
        description=model.description,
        role_bind_type=coerce_role_bind_type(model.role_bind_type),
        role_name=model.role_name,
        selector=model.selector,
        meta=RuleMeta(
            hash=model.hash,
            create_index=model.create_index,
            modify_index=model.modify_index,
        ),
    )


def binding_rule_to_payload(rule: BindingRule) -> dict[str, object]:
    """Serialise ``rule`` into the JSON body accepted by the update endpoint."""

    meta = rule.meta or RuleMeta()
    payload = BindingRulePayload(
        id=rule.id,
        idp_name=rule.provider_ref,
        description=rule.description,
        role_bind_type=str(rule.role_bind_type),
        role_name=rule.role_name,
        selector=rule.selector,
        hash=meta.hash,
        create_index=meta.create_index,
        modify_index=meta.modify_index,
    )
    return payload.model_dump(by_alias=True, exclude_none=True)
