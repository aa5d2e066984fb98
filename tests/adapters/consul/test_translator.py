from __future__ import annotations

from aclbind.adapters.consul import binding_rule_to_payload, parse_binding_rule
from aclbind.domain.model import RoleBindType, RuleMeta
from tests.support.acl_store import make_rule


def test_parse_binding_rule_fills_missing_fields_with_blanks() -> None:
    rule = parse_binding_rule({"ID": "rule-1", "IDPName": "okta", "Selector": None})

    assert rule.id == "rule-1"
    assert rule.provider_ref == "okta"
    assert rule.description == ""
    assert rule.selector == ""
    assert rule.role_name == ""
    assert rule.meta == RuleMeta()


def test_parse_binding_rule_keeps_unknown_role_bind_type() -> None:
    rule = parse_binding_rule({"ID": "rule-1", "RoleBindType": "policy"})

    assert rule.role_bind_type == "policy"
    assert not isinstance(rule.role_bind_type, RoleBindType)


def test_parse_binding_rule_ignores_unknown_keys() -> None:
    rule = parse_binding_rule({"ID": "rule-1", "Namespace": "default", "RoleBindType": "existing"})

    assert rule.role_bind_type is RoleBindType.EXISTING


def test_binding_rule_to_payload_uses_wire_names() -> None:
    rule = make_rule(
        "rule-1",
        provider_ref="okta",
        description="d",
        role_bind_type=RoleBindType.EXISTING,
        role_name="admins",
        selector="",
        meta=RuleMeta(hash="aGFzaA==", create_index=2, modify_index=5),
    )

    assert binding_rule_to_payload(rule) == {
        "ID": "rule-1",
        "IDPName": "okta",
        "Description": "d",
        "RoleBindType": "existing",
        "RoleName": "admins",
        "Selector": "",
        "Hash": "aGFzaA==",
        "CreateIndex": 2,
        "ModifyIndex": 5,
    }


def test_binding_rule_to_payload_without_meta_sends_zero_indices() -> None:
    payload = binding_rule_to_payload(make_rule("rule-1"))

    assert "Hash" not in payload
    assert payload["CreateIndex"] == 0
    assert payload["ModifyIndex"] == 0
