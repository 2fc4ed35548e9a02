"""Tests for the AutoFaker orchestrator: hooks, exclusions and entry points."""

from dataclasses import dataclass, field
from typing import Optional

import pytest

from autofake.core import auto_faker
from autofake.core.auto_faker import AutoFaker, HookState
from autofake.core.binder import AutoBinder
from autofake.core.errors import GeneratorNotFoundError, MemberBindingError
from helpers import FailingBinder, RecordingBinder, Widget


@dataclass
class Node:
    value: int = 0
    child: Optional["Node"] = None


@dataclass
class Basket:
    owner: str = ""
    items: list[int] = field(default_factory=list)


def _widget_faker(binder=None):
    return (
        AutoFaker(Widget, binder=binder)
        .rule_for("a", lambda f, w: "rule-a")
        .rule_set("extra", lambda r: r.rule_for("b", lambda f, w: "rule-b"))
    )


@pytest.fixture
def generator_spy(monkeypatch):
    """Counts root-creation lookups made by the create hook."""
    calls = []
    real = auto_faker.get_generator

    def spy(context):
        calls.append(context.generate_type)
        return real(context)

    monkeypatch.setattr(auto_faker, "get_generator", spy)
    return calls


class TestHookInstallation:
    def test_hooks_start_uninstalled(self):
        faker = AutoFaker(Widget)
        assert faker._create_state is HookState.UNINSTALLED
        assert faker._finish_state is HookState.UNINSTALLED
        assert faker.create_actions["default"] is None

    def test_create_hook_installed_once(self):
        faker = AutoFaker(Widget)
        faker.generate()
        hook = faker.create_actions["default"]
        finish = faker.finalize_actions["default"]

        faker.generate()
        faker.generate_many(2)

        assert hook is not None
        assert faker.create_actions["default"] is hook
        assert faker.finalize_actions["default"] is finish
        assert faker._create_state is HookState.INSTALLED

    def test_external_instantiator_is_not_replaced(self, generator_spy):
        created = []

        def build(f):
            created.append(1)
            return Widget()

        faker = AutoFaker(Widget).custom_instantiator(build)
        result = faker.generate()

        assert len(created) == 1
        assert faker.create_actions["default"] is build
        assert faker._create_state is HookState.UNINSTALLED
        assert generator_spy == []
        # Members are still auto-populated by the finish hook
        assert result.a and result.b and result.c


class TestExclusion:
    def test_default_and_extra_populate_only_c(self, recording_binder):
        faker = _widget_faker(recording_binder)
        result = faker.generate("default,extra")

        assert result.a == "rule-a"
        assert result.b == "rule-b"
        assert isinstance(result.c, str) and result.c
        assert recording_binder.last_members_for(result) == ["c"]

    def test_default_alone_populates_b_and_c(self, recording_binder):
        faker = _widget_faker(recording_binder)
        result = faker.generate("default")

        assert result.a == "rule-a"
        assert result.b != "rule-b"
        assert recording_binder.last_members_for(result) == ["b", "c"]

    def test_later_call_sees_its_own_rule_sets(self, recording_binder):
        faker = _widget_faker(recording_binder)
        first = faker.generate("default,extra")
        second = faker.generate()

        assert recording_binder.last_members_for(first) == ["c"]
        assert recording_binder.last_members_for(second) == ["b", "c"]
        assert second.b != "rule-b"


class TestCreateDeferral:
    def test_non_default_rule_set_uses_fallback_creation(self, generator_spy):
        faker = _widget_faker()
        result = faker.generate("extra")

        assert generator_spy == []
        # Fallback is the plain constructor; only "extra" rules apply
        assert result == Widget(a="", b="rule-b", c="")

    def test_fallback_defaults_to_constructor(self):
        faker = AutoFaker(Widget)
        assert faker.fallback_create_action()(faker.faker_hub) == Widget()

    def test_default_rule_set_uses_generator(self, generator_spy):
        _widget_faker().generate()
        assert generator_spy == [Widget]

    def test_non_default_rule_set_with_own_instantiator(self, generator_spy):
        faker = AutoFaker(Widget).rule_set(
            "seeded", lambda r: r.custom_instantiator(lambda f: Widget(a="seed"))
        )
        result = faker.generate("seeded")

        assert result.a == "seed"
        assert generator_spy == []


class TestFinishPreservation:
    def test_existing_finish_runs_once_after_population(self):
        seen = []
        faker = AutoFaker(Widget).finish_with(lambda f, w: seen.append((w.a, w.b, w.c)))

        result = faker.generate()

        assert seen == [(result.a, result.b, result.c)]
        assert all(seen[0])

    def test_existing_finish_can_adjust_instance(self):
        faker = AutoFaker(Widget).finish_with(lambda f, w: setattr(w, "c", "final"))
        assert faker.generate().c == "final"

    def test_existing_finish_runs_per_instance(self):
        seen = []
        faker = AutoFaker(Widget).finish_with(lambda f, w: seen.append(w))
        results = faker.generate_many(3)
        assert seen == results


class TestPopulate:
    def test_populate_does_not_create_root(self, generator_spy, recording_binder):
        faker = _widget_faker(recording_binder)
        instance = Widget()

        faker.populate(instance)

        assert generator_spy == []
        assert faker.create_actions["default"] is None
        assert instance.a == "rule-a"
        assert instance.b and instance.c
        assert recording_binder.last_members_for(instance) == ["b", "c"]

    def test_populate_with_extra(self, recording_binder):
        faker = _widget_faker(recording_binder)
        instance = Widget()

        faker.populate(instance, "default,extra")

        assert (instance.a, instance.b) == ("rule-a", "rule-b")
        assert recording_binder.last_members_for(instance) == ["c"]


class TestGenerateMany:
    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_length_matches_count(self, count):
        results = AutoFaker(Widget).generate_many(count)
        assert len(results) == count
        assert len({id(r) for r in results}) == count

    def test_zero_invokes_no_hook(self, generator_spy):
        seen = []
        faker = AutoFaker(Widget).finish_with(lambda f, w: seen.append(w))
        assert faker.generate_many(0) == []
        assert seen == []
        assert generator_spy == []

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            AutoFaker(Widget).generate_many(-1)


class TestErrorPropagation:
    def test_generator_error_from_create_hook_is_unchanged(self, monkeypatch):
        error = GeneratorNotFoundError("no generator for Widget")

        def missing(context):
            raise error

        monkeypatch.setattr(auto_faker, "get_generator", missing)

        with pytest.raises(GeneratorNotFoundError) as excinfo:
            AutoFaker(Widget).generate()
        assert excinfo.value is error

    def test_binding_error_from_finish_hook_surfaces_from_generate(self):
        seen = []
        faker = (
            AutoFaker(Widget, binder=FailingBinder("c"))
            .custom_instantiator(lambda f: Widget())
            .rule_for("a", lambda f, w: "rule-a")
            .finish_with(lambda f, w: seen.append(w))
        )

        with pytest.raises(MemberBindingError, match="Widget.c"):
            faker.generate()
        assert seen == []

    def test_binding_error_from_finish_hook_surfaces_from_populate(self):
        faker = AutoFaker(Widget, binder=FailingBinder("c")).rule_for("a", lambda f, w: "rule-a")
        instance = Widget()

        with pytest.raises(MemberBindingError):
            faker.populate(instance)
        assert (instance.a, instance.b, instance.c) == ("rule-a", "auto-b", "")

    def test_binding_error_during_root_creation(self):
        with pytest.raises(MemberBindingError):
            AutoFaker(Widget, binder=FailingBinder("b")).generate()


class TestContext:
    def test_context_clones_default_config(self):
        faker = AutoFaker(Widget)
        context = faker.create_context("a, b")

        assert context.rule_sets == ["a", "b"]
        assert context.config is not auto_faker.default_config()
        assert context.config.parent is auto_faker.default_config()
        assert context.locale == "en_US"
        assert isinstance(context.binder, AutoBinder)

    def test_instance_locale_and_binder_override(self):
        binder = RecordingBinder()
        context = AutoFaker(Widget, locale="de_DE", binder=binder).create_context()
        assert context.locale == "de_DE"
        assert context.binder is binder

    def test_blank_locale_falls_through(self):
        context = AutoFaker(Widget, locale="  ").create_context()
        assert context.locale == "en_US"

    def test_module_configure_changes_defaults(self):
        auto_faker.configure(locale="fr_FR", repeat_count=1)
        faker = AutoFaker(Widget)
        context = faker.create_context()

        assert context.locale == "fr_FR"
        assert context.repeat_count == 1
        assert faker.locale == "fr_FR"

    def test_instance_configure(self):
        faker = AutoFaker(Basket).configure(repeat_count=1, locale="it_IT")
        basket = faker.generate()

        assert len(basket.items) == 1
        assert faker.locale == "it_IT"
        assert faker.create_context().config.parent.parent is auto_faker.default_config()

    def test_each_call_gets_a_fresh_context(self):
        faker = AutoFaker(Widget)
        faker.generate()
        first = faker._context
        faker.generate()
        assert faker._context is not first


class TestRecursion:
    def test_self_reference_stops_at_depth(self):
        node = AutoFaker(Node).generate()
        assert isinstance(node.child, Node)
        assert node.child.child is None

    def test_depth_one_leaves_no_children(self):
        node = AutoFaker(Node).configure(recursive_depth=1).generate()
        assert node.child is None


class TestModuleHelpers:
    def test_generate_single(self):
        assert isinstance(auto_faker.generate(Widget), Widget)

    def test_generate_many_with_overrides(self):
        baskets = auto_faker.generate(Basket, count=2, repeat_count=4)
        assert len(baskets) == 2
        assert all(len(b.items) == 4 for b in baskets)

    def test_create(self):
        binder = AutoBinder()
        faker = auto_faker.create(Widget, locale="en_GB", binder=binder)
        assert faker.create_context().binder is binder
        assert faker.locale == "en_GB"
