"""Human-readable rendering of binding rules."""

from __future__ import annotations

import base64
import binascii
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aclbind.domain.model import BindingRule

_LABEL_WIDTH = len("IdentityProvider:") + 1


def _hash_hex(value: str | None) -> str:
    """Show the base64 content hash from the API as hex, like Consul's own output."""
    if not value:
        return ""
    try:
        return base64.b64decode(value, validate=True).hex()
    except (binascii.Error, ValueError):
        return value


def _line(label: str, value: object) -> str:
    return f"{label + ':':<{_LABEL_WIDTH}}{value}"


def format_binding_rule(rule: BindingRule, *, show_meta: bool = False) -> str:
    """Render ``rule`` one field per line; ``show_meta`` adds hash and raft indices."""

    lines = [
        _line("ID", rule.id),
        _line("IdentityProvider", rule.provider_ref),
        _line("Description", rule.description),
    ]
    if show_meta and rule.meta is not None:
        lines.extend(
            [
                _line("Hash", _hash_hex(rule.meta.hash)),
                _line("Create Index", rule.meta.create_index),
                _line("Modify Index", rule.meta.modify_index),
            ]
        )
    lines.extend(
        [
            _line("RoleBindType", rule.role_bind_type),
            _line("RoleName", rule.role_name),
            _line("Selector", rule.selector),
        ]
    )
    return "\n".join(lines)
