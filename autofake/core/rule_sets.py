"""Rule-set parsing and claimed-member resolution."""

from __future__ import annotations
from typing import Any, Iterable, Mapping

from autofake.core.members import get_type_members
from autofake.models.members import MemberDescriptor


DEFAULT_RULE_SET = "default"


def parse_rule_sets(rule_sets: str | None, current: str = DEFAULT_RULE_SET) -> list[str]:
    """
    Split a comma-delimited rule-set string into clean names.

    A missing or blank string selects only `current`. Blank tokens are
    dropped; order is kept and duplicates are not removed.
    """
    if rule_sets is None or not rule_sets.strip():
        return [current]
    return [name.strip() for name in rule_sets.split(",") if name.strip()]


def claimed_members(
    rule_sets: Iterable[str],
    registry: Mapping[str, Mapping[str, Any]],
) -> set[str]:
    """Names of members with an explicit rule in any of the given rule-sets."""
    claimed: set[str] = set()
    for name in rule_sets:
        rules = registry.get(name)
        if rules:
            claimed.update(rules.keys())
    return claimed


def compute_unclaimed(
    type_: type,
    rule_sets: Iterable[str],
    registry: Mapping[str, Mapping[str, Any]],
) -> list[MemberDescriptor]:
    """Members of `type_` that no active rule-set assigns explicitly."""
    claimed = claimed_members(rule_sets, registry)
    return [
        member for name, member in get_type_members(type_).items()
        if name not in claimed
    ]
