"""Type member inventory — discovers the writable members of a class."""

from __future__ import annotations

import dataclasses
import inspect
import typing
from functools import lru_cache
from typing import Any, ClassVar

from pydantic import BaseModel

from autofake.core.errors import GeneratorNotFoundError
from autofake.models.members import MemberDescriptor


def get_type_members(type_: type) -> dict[str, MemberDescriptor]:
    """
    Return the members of `type_` keyed by name, in declaration order.

    Pydantic models and dataclasses report their fields. Other classes
    report their annotated attributes plus any property with a setter.
    """
    return dict(_inspect_members(type_))


@lru_cache(maxsize=None)
def _inspect_members(type_: type) -> tuple[tuple[str, MemberDescriptor], ...]:
    try:
        if isinstance(type_, type) and issubclass(type_, BaseModel):
            members = _pydantic_members(type_)
        elif dataclasses.is_dataclass(type_):
            members = _dataclass_members(type_)
        else:
            members = _class_members(type_)
    except (NameError, TypeError) as exc:
        raise GeneratorNotFoundError(f"Unresolvable annotations on {type_!r}: {exc}") from exc
    return tuple((m.name, m) for m in members)


def _pydantic_members(type_: type[BaseModel]) -> list[MemberDescriptor]:
    frozen = bool(type_.model_config.get("frozen", False))
    return [
        MemberDescriptor(name=name, type=field.annotation, owner=type_, settable=not frozen)
        for name, field in type_.model_fields.items()
    ]


def _dataclass_members(type_: type) -> list[MemberDescriptor]:
    hints = typing.get_type_hints(type_)
    frozen = type_.__dataclass_params__.frozen
    return [
        MemberDescriptor(
            name=f.name,
            type=hints.get(f.name, f.type),
            owner=type_,
            settable=not frozen,
        )
        for f in dataclasses.fields(type_)
    ]


def _class_members(type_: type) -> list[MemberDescriptor]:
    members: list[MemberDescriptor] = []
    seen: set[str] = set()

    for name, hint in typing.get_type_hints(type_).items():
        if name.startswith("_") or typing.get_origin(hint) is ClassVar or hint is ClassVar:
            continue
        members.append(MemberDescriptor(name=name, type=hint, owner=type_))
        seen.add(name)

    for name, attr in inspect.getmembers(type_, lambda a: isinstance(a, property)):
        if name in seen or name.startswith("_") or attr.fset is None:
            continue
        hints = typing.get_type_hints(attr.fget) if attr.fget else {}
        members.append(MemberDescriptor(name=name, type=hints.get("return", Any), owner=type_))

    return members
