"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from aclbind.adapters.consul import build_consul_client
from aclbind.domain.rule_updates import (
    MissingIdentifierError,
    RuleNotFoundError,
    TransportError,
    UpdateStage,
    is_full_rule_id,
    plan_rule_update,
    resolve_rule_id,
)

if TYPE_CHECKING:
    from aclbind.domain.model import BindingRule
    from aclbind.domain.ports import BindingRuleIdSource, BindingRuleStore
    from aclbind.domain.rule_updates import RuleUpdateRequest


log = getLogger(__name__)


def update_binding_rule(
    request: RuleUpdateRequest,
    *,
    store: BindingRuleStore | None = None,
    id_source: BindingRuleIdSource | None = None,
    address: str | None = None,
    token: str | None = None,
) -> BindingRule:
    """Resolve, fetch, plan and submit one binding rule update.

    Collaborators default to a Consul client built from the environment, with
    ``address`` and ``token`` taking precedence. Nothing is submitted unless every
    earlier step succeeded.
    """

    if not request.rule_id:
        raise MissingIdentifierError

    if store is None or id_source is None:
        client = build_consul_client(address=address, token=token)
        store = store or client
        id_source = id_source or client

    rule_id = _resolve(request.rule_id, id_source)
    current = _fetch(rule_id, store)

    planned = plan_rule_update(
        current,
        request.input,
        request.presence,
        overwrite=request.no_merge,
    )
    log.debug(
        "Planned %s update for %s: %s",
        "overwrite" if request.no_merge else "merge",
        rule_id,
        planned,
    )

    try:
        updated = store.update_binding_rule(planned)
    except Exception as exc:
        raise TransportError(exc, stage=UpdateStage.SUBMISSION, rule_id=rule_id) from exc

    log.info("Binding rule updated successfully")
    return updated


def _resolve(partial: str, id_source: BindingRuleIdSource) -> str:
    if is_full_rule_id(partial):
        return partial

    try:
        candidates = id_source.list_binding_rule_ids()
    except Exception as exc:
        raise TransportError(exc, stage=UpdateStage.RESOLUTION, rule_id=partial) from exc

    rule_id = resolve_rule_id(partial, candidates)
    log.info("Resolved binding rule prefix %r to %s", partial, rule_id)
    return rule_id


def _fetch(rule_id: str, store: BindingRuleStore) -> BindingRule:
    try:
        current = store.read_binding_rule(rule_id)
    except Exception as exc:
        raise TransportError(exc, stage=UpdateStage.FETCH, rule_id=rule_id) from exc
    if current is None:
        raise RuleNotFoundError(rule_id, stage=UpdateStage.FETCH)
    return current
