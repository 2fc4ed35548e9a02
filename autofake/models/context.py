"""Generation context — per-call state shared with generators and binders."""

from __future__ import annotations
from typing import Any
from pydantic import BaseModel, ConfigDict, Field

from .config import AutoConfig


class AutoGenerateContext(BaseModel):
    """
    Holds all state during a single generate/populate call.

    The orchestrator builds one per public call. Generators and binders
    read `generate_type` / `generate_name` to learn what they are
    producing; both are set via `target()` right before each invocation.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Input
    config: AutoConfig
    faker: Any                                   # faker.Faker hub
    rule_sets: list[str] = Field(default_factory=lambda: ["default"])

    # Current target (rewritten before every generator call)
    generate_type: Any = None
    generate_name: str | None = None

    # Types currently under construction, outermost first
    type_stack: list[Any] = Field(default_factory=list)

    @property
    def binder(self) -> Any:
        return self.config.binder

    @property
    def locale(self) -> str:
        return self.config.locale

    @property
    def repeat_count(self) -> int:
        return self.config.repeat_count

    @property
    def recursive_depth(self) -> int:
        return self.config.recursive_depth

    def target(self, type_: Any, name: str | None = None) -> None:
        self.generate_type = type_
        self.generate_name = name

    def depth_of(self, type_: Any) -> int:
        return sum(1 for t in self.type_stack if t is type_)
