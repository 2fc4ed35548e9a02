"""Container generators — lists, sets, tuples and mappings.

Item types are resolved back through the generator factory, so containers
nest arbitrarily. Each container gets `repeat_count` items.
"""

from __future__ import annotations

import collections.abc as cabc
import typing
from typing import Any

from autofake.core.factory import generate_value
from autofake.generators.base import AutoGenerator
from autofake.models.context import AutoGenerateContext


def _origin(type_: Any) -> Any:
    return typing.get_origin(type_) or type_


class ListGenerator(AutoGenerator):
    priority = 30

    ORIGINS = (list, cabc.Sequence, cabc.MutableSequence, cabc.Iterable, cabc.Collection)

    def get_id(self) -> str:
        return "collection.list"

    def applies(self, context: AutoGenerateContext) -> bool:
        return _origin(context.generate_type) in self.ORIGINS

    def generate(self, context: AutoGenerateContext) -> list[Any]:
        args = typing.get_args(context.generate_type)
        if not args:
            return []
        item_type, name = args[0], context.generate_name
        return [generate_value(context, item_type, name) for _ in range(context.repeat_count)]


class SetGenerator(AutoGenerator):
    priority = 30

    ORIGINS = (set, frozenset, cabc.Set, cabc.MutableSet)

    def get_id(self) -> str:
        return "collection.set"

    def applies(self, context: AutoGenerateContext) -> bool:
        return _origin(context.generate_type) in self.ORIGINS

    def generate(self, context: AutoGenerateContext) -> set[Any] | frozenset[Any]:
        target = context.generate_type
        args = typing.get_args(target)
        items: set[Any] = set()
        if args:
            name = context.generate_name
            for _ in range(context.repeat_count):
                value = generate_value(context, args[0], name)
                if value is not None:
                    items.add(value)
        return frozenset(items) if _origin(target) is frozenset else items


class TupleGenerator(AutoGenerator):
    """Fixed-shape `tuple[A, B]` and variadic `tuple[A, ...]`."""

    priority = 30

    def get_id(self) -> str:
        return "collection.tuple"

    def applies(self, context: AutoGenerateContext) -> bool:
        return _origin(context.generate_type) is tuple

    def generate(self, context: AutoGenerateContext) -> tuple[Any, ...]:
        args = typing.get_args(context.generate_type)
        name = context.generate_name
        if not args or args == ((),):
            return ()
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(generate_value(context, args[0], name) for _ in range(context.repeat_count))
        return tuple(generate_value(context, arg, name) for arg in args)


class DictGenerator(AutoGenerator):
    priority = 30

    ORIGINS = (dict, cabc.Mapping, cabc.MutableMapping)

    def get_id(self) -> str:
        return "collection.dict"

    def applies(self, context: AutoGenerateContext) -> bool:
        return _origin(context.generate_type) in self.ORIGINS

    def generate(self, context: AutoGenerateContext) -> dict[Any, Any]:
        args = typing.get_args(context.generate_type)
        if len(args) != 2:
            return {}
        key_type, value_type = args
        name = context.generate_name
        result: dict[Any, Any] = {}
        for _ in range(context.repeat_count):
            key = generate_value(context, key_type, name)
            if key is None:
                continue
            result[key] = generate_value(context, value_type, name)
        return result
