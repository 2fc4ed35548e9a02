"""Rule engine — explicit, rule-set scoped member rules for one target type."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, TypeVar

from faker import Faker

from autofake.core.errors import UnknownMemberError
from autofake.core.members import get_type_members
from autofake.core.rule_sets import DEFAULT_RULE_SET, parse_rule_sets
from autofake.models.config import DEFAULT_LOCALE
from autofake.models.members import MemberDescriptor

logger = logging.getLogger(__name__)

T = TypeVar("T")

Rule = Callable[[Faker, Any], Any]
CreateAction = Callable[[Faker], Any]
FinalizeAction = Callable[[Faker, Any], None]


class RuleFaker(Generic[T]):
    """
    Generates instances of `type_` from explicitly registered rules.

    Rules, create actions and finalize actions are all stored per rule-set.
    Registration targets `current_rule_set`, which is "default" except
    inside `rule_set()`. A generate/populate call activates one or more
    rule-sets; their rules are applied in the order the rule-sets are named.

        faker = (
            RuleFaker(User)
            .rule_for("name", lambda f, u: f.name())
            .rule_set("admin", lambda r: r.rule_for("role", lambda f, u: "admin"))
        )
        faker.generate("default,admin")
    """

    def __init__(self, type_: type[T], locale: str = DEFAULT_LOCALE) -> None:
        self.type_ = type_
        self.current_rule_set = DEFAULT_RULE_SET
        self._locale = locale
        self.faker_hub = Faker(locale)

        self.actions: dict[str, dict[str, Rule]] = {DEFAULT_RULE_SET: {}}
        self.create_actions: dict[str, CreateAction | None] = {
            DEFAULT_RULE_SET: self._instantiate,
        }
        self.finalize_actions: dict[str, FinalizeAction] = {}

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, value: str) -> None:
        if value != self._locale:
            self._locale = value
            self.faker_hub = Faker(value)

    @property
    def type_members(self) -> dict[str, MemberDescriptor]:
        return get_type_members(self.type_)

    # ── Configuration ──────────────────────────────────────────────

    def rule_for(self, member: str, rule: Rule) -> RuleFaker[T]:
        """Register `rule(faker, instance)` as the value source for `member`."""
        if member not in self.type_members:
            raise UnknownMemberError(
                f"{self.type_.__name__} has no member {member!r}"
            )
        self.actions.setdefault(self.current_rule_set, {})[member] = rule
        return self

    def rule_set(self, name: str, configure: Callable[[RuleFaker[T]], Any]) -> RuleFaker[T]:
        """Run `configure(self)` with registrations scoped to rule-set `name`."""
        previous = self.current_rule_set
        self.current_rule_set = name
        try:
            configure(self)
        finally:
            self.current_rule_set = previous
        return self

    def custom_instantiator(self, factory: CreateAction) -> RuleFaker[T]:
        self.create_actions[self.current_rule_set] = factory
        return self

    def finish_with(self, action: FinalizeAction) -> RuleFaker[T]:
        """Run `action(faker, instance)` after all rules of the rule-set applied."""
        self.finalize_actions[self.current_rule_set] = action
        return self

    # ── Execution ──────────────────────────────────────────────────

    def generate(self, rule_sets: str | None = None) -> T:
        """Create one instance and apply the selected rule-sets to it."""
        names = parse_rule_sets(rule_sets, self.current_rule_set)
        create = self._create_action_for(names[0] if names else self.current_rule_set)
        instance = create(self.faker_hub)
        self._populate(instance, names)
        return instance

    def generate_many(self, count: int, rule_sets: str | None = None) -> list[T]:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return [self.generate(rule_sets) for _ in range(count)]

    def populate(self, instance: T, rule_sets: str | None = None) -> None:
        """Apply the selected rule-sets to an existing instance."""
        self._populate(instance, parse_rule_sets(rule_sets, self.current_rule_set))

    def _create_action_for(self, rule_set: str) -> CreateAction:
        return (
            self.create_actions.get(rule_set)
            or self.create_actions.get(self.current_rule_set)
            or self._instantiate
        )

    def _instantiate(self, faker: Faker) -> T:
        return self.type_()

    def _populate(self, instance: T, rule_sets: list[str]) -> None:
        members = self.type_members
        for name in rule_sets:
            for member, rule in self.actions.get(name, {}).items():
                members[member].assign(instance, rule(self.faker_hub, instance))

        for name in rule_sets:
            finalize = self.finalize_actions.get(name)
            if finalize is not None:
                finalize(self.faker_hub, instance)
