"""Abstract base class for all value generators.

Every generator in the system implements this interface. Generators are:
- Self-contained: each produces values for one family of types
- Composable: container generators resolve their item types back through the factory
- Conditional: each generator decides if it handles the current context target
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

from autofake.models.context import AutoGenerateContext


class AutoGenerator(ABC):
    """
    Base class for all value generators.

    Subclasses implement `applies()` and `generate()`.
    The factory filters registered generators by `applies()`, sorts by
    `priority`, and calls `generate()` on the first match.
    """

    # Lower priority = consulted first. Default 100.
    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this generator (e.g., 'primitive.int')."""
        ...

    @abstractmethod
    def applies(self, context: AutoGenerateContext) -> bool:
        """Return True if this generator can produce `context.generate_type`."""
        ...

    @abstractmethod
    def generate(self, context: AutoGenerateContext) -> Any:
        """Produce a value of `context.generate_type`."""
        ...
