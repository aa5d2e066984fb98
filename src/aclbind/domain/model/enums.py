"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class RoleBindType(StrEnum):
    SERVICE = "service"
    EXISTING = "existing"


class RuleField(StrEnum):
    """Editable binding rule fields a user can supply on the command line."""

    DESCRIPTION = "description"
    SELECTOR = "selector"
    ROLE_BIND_TYPE = "role_bind_type"
    ROLE_NAME = "role_name"


def coerce_role_bind_type(value: str) -> RoleBindType | str:
    """Map known values onto ``RoleBindType`` and pass unknown ones through.

    Legality is checked by the remote store, so an unrecognised value (including the
    empty string) is submitted unchanged.
    """

    try:
        return RoleBindType(value)
    except ValueError:
        return value
