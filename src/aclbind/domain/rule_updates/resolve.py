"""Resolve a partial binding rule id to the one full id it abbreviates."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from .errors import AmbiguousPrefixError, RuleNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable

FULL_RULE_ID_LENGTH = 36


def is_full_rule_id(value: str) -> bool:
    """Return whether ``value`` is already a complete, canonical rule id."""

    if len(value) != FULL_RULE_ID_LENGTH:
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True


def resolve_rule_id(partial: str, candidates: Iterable[str]) -> str:
    """Return the single candidate that starts with ``partial``.

    Matching is a case-sensitive prefix test. ``partial`` must be non-empty; callers
    reject a missing id before resolving. Duplicate candidates count once.
    """

    matches = sorted({candidate for candidate in candidates if candidate.startswith(partial)})
    if not matches:
        raise RuleNotFoundError(partial)
    if len(matches) > 1:
        raise AmbiguousPrefixError(partial, matches)
    return matches[0]
