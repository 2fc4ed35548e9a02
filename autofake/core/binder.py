"""Auto binder — constructs instances and writes generated values into members."""

from __future__ import annotations

import inspect
import logging
import typing
from typing import Any, Iterable

from pydantic import BaseModel

from autofake.core.factory import generate_value
from autofake.core.members import get_type_members
from autofake.models.context import AutoGenerateContext
from autofake.models.members import MemberDescriptor

logger = logging.getLogger(__name__)


class AutoBinder:
    """
    Default binder.

    Subclass and override `create_instance` or `populate_instance` to
    change how objects are built or which members receive values.
    """

    def get_members(self, type_: type) -> dict[str, MemberDescriptor]:
        return get_type_members(type_)

    def create_instance(self, context: AutoGenerateContext) -> Any:
        """
        Build an instance of `context.generate_type`.

        Required constructor parameters receive generated values; optional
        ones keep their defaults and are filled in by population.
        """
        type_ = context.generate_type
        args, kwargs = self._constructor_arguments(type_, context)

        if isinstance(type_, type) and issubclass(type_, BaseModel):
            return type_.model_construct(**kwargs)
        return type_(*args, **kwargs)

    def populate_instance(
        self,
        instance: Any,
        context: AutoGenerateContext,
        members: Iterable[MemberDescriptor] | None = None,
    ) -> None:
        """Generate and assign a value for each of `members` (all when None)."""
        if instance is None:
            return
        if members is None:
            members = self.get_members(type(instance)).values()

        config = context.config
        for member in members:
            if not member.settable or config.skips(member.type, member.path):
                continue
            value = generate_value(context, member.type, member.name)
            member.assign(instance, value)

    def _constructor_arguments(
        self, type_: type, context: AutoGenerateContext,
    ) -> tuple[list[Any], dict[str, Any]]:
        try:
            signature = inspect.signature(type_)
        except (TypeError, ValueError):
            logger.debug("No inspectable constructor for %r", type_)
            return [], {}

        hints = {**_resolved_hints(type_.__init__), **_resolved_hints(type_)}

        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for name, param in signature.parameters.items():
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue
            if param.default is not param.empty:
                continue

            annotation = hints.get(name, param.annotation)
            if annotation is param.empty or isinstance(annotation, str):
                annotation = Any
            value = generate_value(context, annotation, name)

            if param.kind is param.POSITIONAL_ONLY:
                args.append(value)
            else:
                kwargs[name] = value
        return args, kwargs


def _resolved_hints(obj: Any) -> dict[str, Any]:
    try:
        return typing.get_type_hints(obj)
    except (NameError, TypeError) as exc:
        logger.debug("Unresolved annotations on %r: %s", obj, exc)
        return {}
