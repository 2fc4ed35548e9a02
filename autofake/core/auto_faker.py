"""Auto faker — explicit rules first, automatic generation for everything else."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, TypeVar

from faker import Faker

from autofake.core.binder import AutoBinder
from autofake.core.factory import get_generator
from autofake.core.rule_faker import CreateAction, FinalizeAction, RuleFaker
from autofake.core.rule_sets import compute_unclaimed, parse_rule_sets
from autofake.models.config import AutoConfig
from autofake.models.context import AutoGenerateContext

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HookState(str, Enum):
    UNINSTALLED = "uninstalled"
    INSTALLED = "installed"


class AutoFaker(RuleFaker[T]):
    """
    Rule faker that fills in every member no explicit rule covers.

    Two hooks are installed into the rule engine the first time they are
    needed, and never again for the lifetime of the instance:

    - a create hook in the "default" slot, which builds the root object
      automatically when "default" is among the requested rule-sets and
      otherwise defers to the creation behaviour that existed before;
    - a finish hook, which populates the members left unclaimed by the
      active rule-sets and then runs any finish action registered before it.

    Both hooks read the context of the call currently in progress, which
    every public entry point rebuilds. Instances are not safe to share
    between threads.
    """

    def __init__(self, type_: type[T], locale: str | None = None, binder: Any = None) -> None:
        super().__init__(type_, locale if locale and locale.strip() else default_config().locale)
        self._locale_override = locale
        self._binder = binder
        self._config: AutoConfig | None = None
        self._context: AutoGenerateContext | None = None

        self._create_state = HookState.UNINSTALLED
        self._finish_state = HookState.UNINSTALLED
        self._prior_finish: FinalizeAction | None = None

        # Clear the default slot so a later custom_instantiator() is detectable
        self._fallback_create: CreateAction | None = self.create_actions.get(self.current_rule_set)
        self.create_actions[self.current_rule_set] = None

    def configure(self, **overrides: Any) -> AutoFaker[T]:
        """Set instance-level configuration (locale, binder, repeat_count, ...)."""
        self._config = (self._config or default_config()).derive(**overrides)
        self._locale_override = self._config.locale
        self._binder = self._config.binder
        self.locale = self._config.locale
        return self

    # ── Public entry points ────────────────────────────────────────

    def generate(self, rule_sets: str | None = None) -> T:
        self._begin(rule_sets)
        self._ensure_create_installed()
        self._ensure_finish_installed()
        return super().generate(rule_sets)

    def generate_many(self, count: int, rule_sets: str | None = None) -> list[T]:
        """Generate `count` instances; each item goes through `generate` and gets its own context."""
        self._begin(rule_sets)
        self._ensure_create_installed()
        self._ensure_finish_installed()
        return super().generate_many(count, rule_sets)

    def populate(self, instance: T, rule_sets: str | None = None) -> None:
        self._begin(rule_sets)
        self._ensure_finish_installed()
        super().populate(instance, rule_sets)

    # ── Context ────────────────────────────────────────────────────

    def create_context(self, rule_sets: str | None = None) -> AutoGenerateContext:
        """Build the generation context for one call."""
        baseline = self._config or default_config()
        locale = self._locale_override if self._locale_override and self._locale_override.strip() else None
        config = baseline.derive(locale=locale, binder=self._binder)
        self.locale = config.locale

        return AutoGenerateContext(
            config=config,
            faker=self.faker_hub,
            rule_sets=parse_rule_sets(rule_sets, self.current_rule_set),
        )

    def _begin(self, rule_sets: str | None) -> None:
        self._context = self.create_context(rule_sets)

    def _active_context(self) -> AutoGenerateContext:
        # Hooks fired outside a public entry point get a fresh context
        if self._context is None:
            self._context = self.create_context()
        return self._context

    # ── Create hook ────────────────────────────────────────────────

    def fallback_create_action(self) -> CreateAction:
        return self._fallback_create or self._instantiate

    def _ensure_create_installed(self) -> None:
        if self._create_state is HookState.INSTALLED:
            return
        if self.create_actions.get(self.current_rule_set) is not None:
            # Root creation was customised externally; leave it alone
            return
        self.create_actions[self.current_rule_set] = self._auto_create
        self._create_state = HookState.INSTALLED
        logger.debug("Installed create hook for %s", self.type_.__name__)

    def _auto_create(self, faker: Faker) -> T:
        context = self._active_context()
        if self.current_rule_set not in context.rule_sets:
            # Non-default rule-sets own construction themselves
            logger.debug("Deferring %s creation for rule-sets %s",
                         self.type_.__name__, context.rule_sets)
            return self.fallback_create_action()(faker)

        context.target(self.type_, None)
        generator = get_generator(context)
        return generator.generate(context)

    # ── Finish hook ────────────────────────────────────────────────

    def _ensure_finish_installed(self) -> None:
        if self._finish_state is HookState.INSTALLED:
            return
        self._prior_finish = self.finalize_actions.get(self.current_rule_set)
        self.finish_with(self._auto_finish)
        self._finish_state = HookState.INSTALLED
        logger.debug("Installed finish hook for %s (wrapping existing: %s)",
                     self.type_.__name__, self._prior_finish is not None)

    def _auto_finish(self, faker: Faker, instance: T) -> None:
        context = self._active_context()
        members = compute_unclaimed(self.type_, context.rule_sets, self.actions)

        # The root counts towards recursion limits while its members are built
        context.type_stack.append(self.type_)
        try:
            context.binder.populate_instance(instance, context, members)
        finally:
            context.type_stack.pop()

        if self._prior_finish is not None:
            self._prior_finish(faker, instance)


# ── Process-wide defaults ──────────────────────────────────────────

_default_config = AutoConfig(binder=AutoBinder())


def default_config() -> AutoConfig:
    return _default_config


def configure(**overrides: Any) -> AutoConfig:
    """Change the process-wide default configuration."""
    global _default_config
    _default_config = _default_config.derive(**overrides)
    return _default_config


def create(type_: type[T], locale: str | None = None, binder: Any = None) -> AutoFaker[T]:
    return AutoFaker(type_, locale=locale, binder=binder)


def generate(
    type_: type[T],
    count: int | None = None,
    rule_sets: str | None = None,
    **overrides: Any,
) -> T | list[T]:
    """
    Generate one instance of `type_` (or a list when `count` is given).

    Keyword overrides configure this request only, e.g.
    `generate(Order, count=5, repeat_count=1, locale="de_DE")`.
    """
    faker = AutoFaker(type_)
    if overrides:
        faker.configure(**overrides)
    if count is None:
        return faker.generate(rule_sets)
    return faker.generate_many(count, rule_sets)
