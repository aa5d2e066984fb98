"""Inputs for a binding rule update, built once per invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from aclbind.domain.model import RoleBindType, RuleField

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(slots=True, frozen=True)
class RuleUpdateInput:
    """Field values as supplied (or defaulted) on the command line."""

    description: str = ""
    selector: str = ""
    role_bind_type: str = RoleBindType.SERVICE
    role_name: str = ""


@dataclass(slots=True, frozen=True)
class FieldPresence:
    """Which editable fields the user passed explicitly, whatever their value."""

    fields: frozenset[RuleField] = frozenset()

    @classmethod
    def of(cls, names: Iterable[str | RuleField]) -> FieldPresence:
        return cls(fields=frozenset(RuleField(name) for name in names))

    def __contains__(self, item: object) -> bool:
        return item in self.fields


@dataclass(slots=True, frozen=True)
class RuleUpdateRequest:
    """Everything one ``binding-rule update`` invocation asks for."""

    rule_id: str
    input: RuleUpdateInput = field(default_factory=RuleUpdateInput)
    presence: FieldPresence = field(default_factory=FieldPresence)
    no_merge: bool = False
    show_meta: bool = False
