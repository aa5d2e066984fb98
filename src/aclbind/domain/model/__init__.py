"""Public domain model surface."""

from __future__ import annotations

from aclbind.domain.model.binding_rule import BindingRule, RuleMeta
from aclbind.domain.model.enums import RoleBindType, RuleField, coerce_role_bind_type

__all__ = [
    "BindingRule",
    "RoleBindType",
    "RuleField",
    "RuleMeta",
    "coerce_role_bind_type",
]
