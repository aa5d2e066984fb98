"""Public interface for the Consul ACL adapter."""

from __future__ import annotations

from .client import ConsulACLClient, ConsulAPIError, build_consul_client
from .schema import BindingRulePayload, BindingRuleSummary
from .translator import binding_rule_to_payload, parse_binding_rule

__all__ = [
    "BindingRulePayload",
    "BindingRuleSummary",
    "ConsulACLClient",
    "ConsulAPIError",
    "binding_rule_to_payload",
    "build_consul_client",
    "parse_binding_rule",
]
