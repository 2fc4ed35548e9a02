"""High-level fake data service — facade for the API layer."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter

from autofake.core.auto_faker import AutoFaker

logger = logging.getLogger(__name__)


class FakeService:
    """Keeps a catalog of named model types and generates JSON-ready data for them."""

    def __init__(self) -> None:
        self._fakers: dict[str, AutoFaker[Any]] = {}
        self._adapters: dict[str, TypeAdapter[Any]] = {}

    def register(
        self,
        name: str,
        model_type: type,
        faker: AutoFaker[Any] | None = None,
    ) -> AutoFaker[Any]:
        """
        Expose `model_type` under `name`.

        Pass a pre-configured `faker` to serve explicit rules; otherwise a
        plain AutoFaker is created. Returns the faker so rules can be added.
        """
        if faker is None:
            faker = AutoFaker(model_type)
        elif faker.type_ is not model_type:
            raise ValueError(
                f"Faker generates {faker.type_.__name__}, not {model_type.__name__}"
            )

        self._fakers[name] = faker
        self._adapters[name] = TypeAdapter(list[model_type])  # type: ignore[valid-type]
        logger.info("Registered model %r (%s)", name, model_type.__name__)
        return faker

    def get_faker(self, name: str) -> AutoFaker[Any] | None:
        return self._fakers.get(name)

    def generate(
        self,
        name: str,
        count: int = 1,
        rule_sets: str | None = None,
    ) -> list[dict[str, Any]]:
        if name not in self._fakers:
            raise KeyError(name)

        items = self._fakers[name].generate_many(count, rule_sets)
        return self._adapters[name].dump_python(items, mode="json")

    def list_models(self) -> list[dict[str, Any]]:
        return [
            {
                "name": name,
                "type": faker.type_.__name__,
                "members": list(faker.type_members),
            }
            for name, faker in self._fakers.items()
        ]
