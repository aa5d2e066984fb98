"""Domain port definitions for adapters."""

from __future__ import annotations

from .acl import BindingRuleClient, BindingRuleIdSource, BindingRuleStore

__all__ = [
    "BindingRuleClient",
    "BindingRuleIdSource",
    "BindingRuleStore",
]
