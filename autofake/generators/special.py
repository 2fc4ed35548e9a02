"""Generators for enums and typing special forms (Literal, Optional, Union)."""

from __future__ import annotations

import enum
import types
import typing
from typing import Any, Literal, Union

from autofake.core.factory import generate_value
from autofake.generators.base import AutoGenerator
from autofake.models.context import AutoGenerateContext

_UNION_ORIGINS = (Union, types.UnionType)


def _union_args(type_: Any) -> tuple[Any, ...]:
    if typing.get_origin(type_) in _UNION_ORIGINS:
        return typing.get_args(type_)
    return ()


class EnumGenerator(AutoGenerator):
    """Picks a random member of an Enum type."""

    priority = 20

    def get_id(self) -> str:
        return "special.enum"

    def applies(self, context: AutoGenerateContext) -> bool:
        t = context.generate_type
        return isinstance(t, type) and issubclass(t, enum.Enum) and len(t) > 0

    def generate(self, context: AutoGenerateContext) -> Any:
        return context.faker.random_element(list(context.generate_type))


class LiteralGenerator(AutoGenerator):
    priority = 20

    def get_id(self) -> str:
        return "special.literal"

    def applies(self, context: AutoGenerateContext) -> bool:
        return typing.get_origin(context.generate_type) is Literal

    def generate(self, context: AutoGenerateContext) -> Any:
        return context.faker.random_element(typing.get_args(context.generate_type))


class OptionalGenerator(AutoGenerator):
    """`X | None` always generates an `X`."""

    priority = 20

    def get_id(self) -> str:
        return "special.optional"

    def applies(self, context: AutoGenerateContext) -> bool:
        return type(None) in _union_args(context.generate_type)

    def generate(self, context: AutoGenerateContext) -> Any:
        arms = [a for a in _union_args(context.generate_type) if a is not type(None)]
        inner = arms[0] if len(arms) == 1 else Union[tuple(arms)]
        return generate_value(context, inner, context.generate_name)


class UnionGenerator(AutoGenerator):
    """Generates a value for one randomly chosen arm of a union."""

    priority = 21

    def get_id(self) -> str:
        return "special.union"

    def applies(self, context: AutoGenerateContext) -> bool:
        return bool(_union_args(context.generate_type))

    def generate(self, context: AutoGenerateContext) -> Any:
        arm = context.faker.random_element(_union_args(context.generate_type))
        return generate_value(context, arm, context.generate_name)
