from __future__ import annotations

import pytest

from aclbind.domain.rule_updates import (
    AmbiguousPrefixError,
    RuleNotFoundError,
    UpdateStage,
    is_full_rule_id,
    resolve_rule_id,
)

FULL_ID = "43cb72df-9c6f-4315-ac8a-01a9d98155ef"


def test_resolve_rule_id_returns_unique_prefix_match() -> None:
    assert resolve_rule_id("43cb72df", ["43cb72df-aaa"]) == "43cb72df-aaa"


def test_resolve_rule_id_rejects_ambiguous_prefix() -> None:
    with pytest.raises(AmbiguousPrefixError) as excinfo:
        resolve_rule_id("43cb72df", ["43cb72df-aaa", "43cb72df-bbb"])

    error = excinfo.value
    assert error.matches == ("43cb72df-aaa", "43cb72df-bbb")
    assert error.stage is UpdateStage.RESOLUTION
    assert "2 binding rules" in str(error)
    assert "43cb72df-aaa" in str(error)
    assert "43cb72df-bbb" in str(error)


def test_resolve_rule_id_fails_without_match() -> None:
    with pytest.raises(RuleNotFoundError, match='no binding rule ID has prefix "ffff"'):
        resolve_rule_id("ffff", ["43cb72df-aaa", "0a1b2c3d-bbb"])


def test_resolve_rule_id_fails_on_empty_candidates() -> None:
    with pytest.raises(RuleNotFoundError):
        resolve_rule_id("43cb", [])


def test_resolve_rule_id_is_case_sensitive() -> None:
    with pytest.raises(RuleNotFoundError):
        resolve_rule_id("43CB72DF", ["43cb72df-aaa"])


def test_resolve_rule_id_accepts_full_id_among_candidates() -> None:
    other = "43cb72df-0000-4315-ac8a-01a9d98155ef"

    assert resolve_rule_id(FULL_ID, [other, FULL_ID]) == FULL_ID


def test_resolve_rule_id_ignores_duplicate_candidates() -> None:
    assert resolve_rule_id("43cb", ["43cb72df-aaa", "43cb72df-aaa"]) == "43cb72df-aaa"


def test_resolve_rule_id_consumes_any_iterable() -> None:
    candidates = (candidate for candidate in ["0a1b-aaa", "43cb-bbb"])

    assert resolve_rule_id("0a", candidates) == "0a1b-aaa"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (FULL_ID, True),
        (FULL_ID[:-1], False),
        ("43cb72df", False),
        ("x" * 36, False),
    ],
)
def test_is_full_rule_id(value: str, *, expected: bool) -> None:
    assert is_full_rule_id(value) is expected
