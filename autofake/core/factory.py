"""Generator factory — stores generators and resolves one per target type."""

from __future__ import annotations

import logging
from typing import Any

from autofake.core.errors import GeneratorNotFoundError
from autofake.generators.base import AutoGenerator
from autofake.models.context import AutoGenerateContext

logger = logging.getLogger(__name__)


class GeneratorFactory:
    """
    Central registry for all value generators.

    Generators are registered at startup. During generation, the factory
    returns the first applicable generator in priority order.
    """

    def __init__(self) -> None:
        self._generators: dict[str, AutoGenerator] = {}

    def register(self, generator: AutoGenerator) -> None:
        """Register a generator, replacing any with the same id."""
        self._generators[generator.get_id()] = generator

    def unregister(self, generator_id: str) -> None:
        """Remove a generator from the factory."""
        self._generators.pop(generator_id, None)

    def get_generator_by_id(self, generator_id: str) -> AutoGenerator | None:
        return self._generators.get(generator_id)

    def list_generators(self) -> list[AutoGenerator]:
        """Return all registered generators in priority order."""
        return sorted(self._generators.values(), key=lambda g: g.priority)

    def get_generator(self, context: AutoGenerateContext) -> AutoGenerator:
        """Return the generator for `context.generate_type`."""
        for generator in self.list_generators():
            if generator.applies(context):
                return generator
        raise GeneratorNotFoundError(
            f"No generator for {context.generate_type!r}"
            + (f" (member {context.generate_name!r})" if context.generate_name else "")
        )


def create_default_factory() -> GeneratorFactory:
    """Create a factory with all built-in generators."""
    from autofake.generators.primitives import create_primitive_generators
    from autofake.generators.special import (
        EnumGenerator, LiteralGenerator, OptionalGenerator, UnionGenerator,
    )
    from autofake.generators.containers import (
        DictGenerator, ListGenerator, SetGenerator, TupleGenerator,
    )
    from autofake.generators.instance import InstanceGenerator

    factory = GeneratorFactory()
    for generator in create_primitive_generators():
        factory.register(generator)
    factory.register(EnumGenerator())
    factory.register(LiteralGenerator())
    factory.register(OptionalGenerator())
    factory.register(UnionGenerator())
    factory.register(ListGenerator())
    factory.register(SetGenerator())
    factory.register(TupleGenerator())
    factory.register(DictGenerator())
    factory.register(InstanceGenerator())
    return factory


_default_factory: GeneratorFactory | None = None


def default_factory() -> GeneratorFactory:
    """The process-wide factory, built on first use."""
    global _default_factory
    if _default_factory is None:
        _default_factory = create_default_factory()
        logger.debug("Built default generator factory (%d generators)",
                     len(_default_factory.list_generators()))
    return _default_factory


def get_generator(context: AutoGenerateContext) -> AutoGenerator:
    return default_factory().get_generator(context)


def generate_value(context: AutoGenerateContext, type_: Any, name: str | None = None) -> Any:
    """Target the context at `type_` and run the generator resolved for it."""
    context.target(type_, name)
    return get_generator(context).generate(context)
