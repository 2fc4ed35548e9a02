"""Nested object generation — creates and populates any other class."""

from __future__ import annotations

import enum
import logging
from typing import Any

from autofake.generators.base import AutoGenerator
from autofake.models.context import AutoGenerateContext

logger = logging.getLogger(__name__)


class InstanceGenerator(AutoGenerator):
    """
    Fallback for classes no other generator handles.

    Delegates construction and member population to the context's binder.
    A type nested inside itself more than `recursive_depth` times yields
    None, which breaks reference cycles.
    """

    priority = 100

    def get_id(self) -> str:
        return "instance.object"

    def applies(self, context: AutoGenerateContext) -> bool:
        t = context.generate_type
        return isinstance(t, type) and not issubclass(t, enum.Enum)

    def generate(self, context: AutoGenerateContext) -> Any:
        type_ = context.generate_type
        if context.depth_of(type_) >= context.recursive_depth:
            logger.debug("Recursion limit reached for %s, yielding None", type_.__name__)
            return None

        binder = context.binder
        context.type_stack.append(type_)
        try:
            instance = binder.create_instance(context)
            binder.populate_instance(instance, context, list(binder.get_members(type_).values()))
        finally:
            context.type_stack.pop()
        return instance
