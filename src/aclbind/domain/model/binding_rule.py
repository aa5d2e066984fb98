"""Binding rule entity."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import RoleBindType


@dataclass(slots=True, frozen=True)
class RuleMeta:
    """Store-internal bookkeeping returned alongside a rule."""

    hash: str | None = None
    create_index: int = 0
    modify_index: int = 0


@dataclass(slots=True, frozen=True)
class BindingRule:
    """An ACL binding rule as held by the remote access-control service.

    ``id`` and ``provider_ref`` are assigned at creation and never edited by an
    update; every other field is user-editable.
    """

    id: str
    provider_ref: str
    description: str = ""
    role_bind_type: RoleBindType | str = RoleBindType.SERVICE
    role_name: str = ""
    selector: str = ""
    meta: RuleMeta | None = None
