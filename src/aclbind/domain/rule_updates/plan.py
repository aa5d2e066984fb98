"""Compute the binding rule to submit for an update."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from aclbind.domain.model import BindingRule, RuleField, coerce_role_bind_type

from .errors import MissingRequiredFieldError

if TYPE_CHECKING:
    from .dto import FieldPresence, RuleUpdateInput


def plan_rule_update(
    current: BindingRule,
    update: RuleUpdateInput,
    presence: FieldPresence,
    *,
    overwrite: bool = False,
) -> BindingRule:
    """Return the rule to submit given the stored rule and the user's input.

    Overwrite: every editable field is taken verbatim from ``update``, so fields the
    user left out fall back to their zero value. ``role_name`` is required.

    Merge (default): start from ``current``. ``description`` and ``role_name`` are
    replaced only by a non-empty value, since an empty string cannot be told apart
    from "not given" for them. ``role_bind_type`` and ``selector`` are replaced
    whenever the user passed them, empty or not, which is how a selector gets
    cleared.

    ``id`` and ``provider_ref`` always come from ``current``; ``current`` itself is
    left untouched.
    """

    if overwrite:
        return _overwrite(current, update)
    return _merge(current, update, presence)


def _overwrite(current: BindingRule, update: RuleUpdateInput) -> BindingRule:
    if not update.role_name:
        raise MissingRequiredFieldError(RuleField.ROLE_NAME, rule_id=current.id)
    return BindingRule(
        id=current.id,
        provider_ref=current.provider_ref,
        description=update.description,
        role_bind_type=coerce_role_bind_type(update.role_bind_type),
        role_name=update.role_name,
        selector=update.selector,
    )


def _merge(current: BindingRule, update: RuleUpdateInput, presence: FieldPresence) -> BindingRule:
    changes: dict[str, object] = {}
    if update.description:
        changes["description"] = update.description
    if update.role_name:
        changes["role_name"] = update.role_name
    if RuleField.ROLE_BIND_TYPE in presence:
        changes["role_bind_type"] = coerce_role_bind_type(update.role_bind_type)
    if RuleField.SELECTOR in presence:
        changes["selector"] = update.selector
    return replace(current, **changes)
