"""Scalar generators — one per built-in value type, backed by Faker."""

from __future__ import annotations

import datetime as dt
import uuid
from decimal import Decimal
from typing import Any, Callable

from faker import Faker

from autofake.generators.base import AutoGenerator
from autofake.models.context import AutoGenerateContext


class PrimitiveGenerator(AutoGenerator):
    """Produces values for exactly one type using a Faker provider call."""

    priority = 10

    def __init__(self, type_: Any, provider: Callable[[Faker], Any], name: str | None = None) -> None:
        self.type_ = type_
        self.provider = provider
        self.name = name or getattr(type_, "__name__", str(type_))

    def get_id(self) -> str:
        return f"primitive.{self.name}"

    def applies(self, context: AutoGenerateContext) -> bool:
        return context.generate_type is self.type_

    def generate(self, context: AutoGenerateContext) -> Any:
        return self.provider(context.faker)


class NoneGenerator(AutoGenerator):
    """Untyped and `None` targets get no value."""

    priority = 10

    def get_id(self) -> str:
        return "primitive.none"

    def applies(self, context: AutoGenerateContext) -> bool:
        return context.generate_type in (None, type(None), Any, object)

    def generate(self, context: AutoGenerateContext) -> Any:
        return None


def create_primitive_generators() -> list[AutoGenerator]:
    return [
        PrimitiveGenerator(bool, lambda f: f.pybool()),
        PrimitiveGenerator(int, lambda f: f.pyint(min_value=0, max_value=9999)),
        PrimitiveGenerator(float, lambda f: f.pyfloat(min_value=0, max_value=9999)),
        PrimitiveGenerator(Decimal, lambda f: f.pydecimal(left_digits=5, right_digits=2, positive=True)),
        PrimitiveGenerator(str, lambda f: f.word()),
        PrimitiveGenerator(bytes, lambda f: f.binary(length=16)),
        PrimitiveGenerator(dt.datetime, lambda f: f.date_time()),
        PrimitiveGenerator(dt.date, lambda f: f.date_object()),
        PrimitiveGenerator(dt.time, lambda f: f.time_object()),
        PrimitiveGenerator(dt.timedelta, lambda f: f.time_delta(end_datetime="+30d")),
        PrimitiveGenerator(uuid.UUID, lambda f: f.uuid4(cast_to=None)),
        NoneGenerator(),
    ]
