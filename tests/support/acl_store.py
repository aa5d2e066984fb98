"""Reusable fakes and helpers for binding rule tests."""

from __future__ import annotations

from dataclasses import replace

from aclbind.domain.model import BindingRule, RoleBindType, RuleMeta


def make_rule(
    rule_id: str = "43cb72df-9c6f-4315-ac8a-01a9d98155ef",
    *,
    provider_ref: str = "minikube",
    description: str = "k8s services",
    role_bind_type: RoleBindType | str = RoleBindType.SERVICE,
    role_name: str = "k8s-{{serviceaccount.name}}",
    selector: str = "serviceaccount.namespace==default",
    meta: RuleMeta | None = None,
) -> BindingRule:
    """Create a binding rule with realistic defaults."""

    return BindingRule(
        id=rule_id,
        provider_ref=provider_ref,
        description=description,
        role_bind_type=role_bind_type,
        role_name=role_name,
        selector=selector,
        meta=meta,
    )


class FakeBindingRuleStore:
    """In-memory implementation of the binding rule ports for testing."""

    def __init__(
        self,
        rules: list[BindingRule] | None = None,
        *,
        list_error: Exception | None = None,
        read_error: Exception | None = None,
        update_error: Exception | None = None,
    ) -> None:
        self.rules: dict[str, BindingRule] = {rule.id: rule for rule in rules or []}
        self.list_error = list_error
        self.read_error = read_error
        self.update_error = update_error
        self.list_calls = 0
        self.read_calls: list[str] = []
        self.submitted: list[BindingRule] = []

    def list_binding_rule_ids(self) -> list[str]:
        self.list_calls += 1
        if self.list_error is not None:
            raise self.list_error
        return list(self.rules)

    def read_binding_rule(self, rule_id: str) -> BindingRule | None:
        self.read_calls.append(rule_id)
        if self.read_error is not None:
            raise self.read_error
        return self.rules.get(rule_id)

    def update_binding_rule(self, rule: BindingRule) -> BindingRule:
        self.submitted.append(rule)
        if self.update_error is not None:
            raise self.update_error
        previous = self.rules.get(rule.id)
        modify_index = previous.meta.modify_index + 1 if previous and previous.meta else 1
        stored = replace(rule, meta=RuleMeta(hash="aGFzaA==", modify_index=modify_index))
        self.rules[rule.id] = stored
        return stored
