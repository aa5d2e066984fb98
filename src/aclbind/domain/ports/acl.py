"""Ports for reading and writing binding rules on the access-control service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from aclbind.domain.model import BindingRule


@runtime_checkable
class BindingRuleIdSource(Protocol):
    """Lists the full identifiers of every binding rule known to the service."""

    def list_binding_rule_ids(self) -> Sequence[str]: ...


@runtime_checkable
class BindingRuleStore(Protocol):
    """Reads and rewrites individual binding rules."""

    def read_binding_rule(self, rule_id: str) -> BindingRule | None:
        """Return the stored rule, or ``None`` when no rule has ``rule_id``."""
        ...

    def update_binding_rule(self, rule: BindingRule) -> BindingRule:
        """Submit ``rule`` and return the rule as stored after the update."""
        ...


@runtime_checkable
class BindingRuleClient(BindingRuleIdSource, BindingRuleStore, Protocol):
    """Both capabilities, as offered by a single API client."""


__all__ = ["BindingRuleClient", "BindingRuleIdSource", "BindingRuleStore"]
