"""Binding rule update subsystem: id resolution and update planning."""

from __future__ import annotations

from .dto import FieldPresence, RuleUpdateInput, RuleUpdateRequest
from .errors import (
    AmbiguousPrefixError,
    BindingRuleUpdateError,
    MissingIdentifierError,
    MissingRequiredFieldError,
    RuleNotFoundError,
    TransportError,
    UpdateStage,
)
from .plan import plan_rule_update
from .resolve import is_full_rule_id, resolve_rule_id

__all__ = [
    "AmbiguousPrefixError",
    "BindingRuleUpdateError",
    "FieldPresence",
    "MissingIdentifierError",
    "MissingRequiredFieldError",
    "RuleNotFoundError",
    "RuleUpdateInput",
    "RuleUpdateRequest",
    "TransportError",
    "UpdateStage",
    "is_full_rule_id",
    "plan_rule_update",
    "resolve_rule_id",
]
