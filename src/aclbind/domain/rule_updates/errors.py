"""Error taxonomy for the binding rule update pipeline."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class UpdateStage(StrEnum):
    RESOLUTION = "resolution"
    FETCH = "fetch"
    PLAN = "plan"
    SUBMISSION = "submission"


_STAGE_CONTEXT: dict[UpdateStage, str] = {
    UpdateStage.RESOLUTION: "Error determining binding rule ID",
    UpdateStage.FETCH: "Error when retrieving current binding rule",
    UpdateStage.PLAN: "Error planning binding rule update",
    UpdateStage.SUBMISSION: "Error updating binding rule",
}


class BindingRuleUpdateError(RuntimeError):
    """Base class for failures that end a binding rule update.

    The message is prefixed with the stage that failed and, once known, the rule id,
    so it can be shown to the user as is.
    """

    def __init__(self, detail: str, *, stage: UpdateStage, rule_id: str | None = None) -> None:
        context = _STAGE_CONTEXT[stage]
        if rule_id is not None:
            context = f'{context} "{rule_id}"'
        super().__init__(f"{context}: {detail}")
        self.detail = detail
        self.stage = stage
        self.rule_id = rule_id


class MissingIdentifierError(BindingRuleUpdateError):
    """Raised when no (partial) rule id was supplied at all."""

    def __init__(self) -> None:
        super().__init__("no binding rule ID was given", stage=UpdateStage.RESOLUTION)


class RuleNotFoundError(BindingRuleUpdateError):
    """Raised when a prefix matches no rule, or a resolved id has no stored rule."""

    def __init__(self, rule_id: str, *, stage: UpdateStage = UpdateStage.RESOLUTION) -> None:
        if stage is UpdateStage.RESOLUTION:
            super().__init__(f'no binding rule ID has prefix "{rule_id}"', stage=stage)
        else:
            super().__init__("binding rule not found", stage=stage, rule_id=rule_id)
        self.lookup = rule_id


class AmbiguousPrefixError(BindingRuleUpdateError):
    """Raised when a prefix matches more than one rule id."""

    def __init__(self, prefix: str, matches: Sequence[str]) -> None:
        listed = ", ".join(matches)
        super().__init__(
            f'prefix "{prefix}" matches {len(matches)} binding rules: {listed}',
            stage=UpdateStage.RESOLUTION,
        )
        self.prefix = prefix
        self.matches = tuple(matches)


class MissingRequiredFieldError(BindingRuleUpdateError):
    """Raised when an overwrite update lacks a field the rule cannot do without."""

    def __init__(self, field_name: str, *, rule_id: str | None = None) -> None:
        super().__init__(
            f"missing required field '{field_name}'",
            stage=UpdateStage.PLAN,
            rule_id=rule_id,
        )
        self.field_name = str(field_name)


class TransportError(BindingRuleUpdateError):
    """Wraps a failure of the candidate source or the record store."""

    def __init__(
        self,
        cause: Exception,
        *,
        stage: UpdateStage,
        rule_id: str | None = None,
    ) -> None:
        super().__init__(str(cause) or type(cause).__name__, stage=stage, rule_id=rule_id)
        self.cause = cause
