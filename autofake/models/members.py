"""Member descriptors: the writable fields/properties of a generated type."""

from __future__ import annotations
from typing import Any
from pydantic import BaseModel, ConfigDict

from autofake.core.errors import MemberBindingError


class MemberDescriptor(BaseModel):
    """A single named member of a type, with its annotated type."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    type: Any
    owner: Any
    settable: bool = True

    @property
    def path(self) -> str:
        return f"{getattr(self.owner, '__name__', self.owner)}.{self.name}"

    def assign(self, instance: Any, value: Any) -> None:
        if not self.settable:
            raise MemberBindingError(f"Member {self.path} is not settable")
        try:
            setattr(instance, self.name, value)
        except (AttributeError, TypeError, ValueError) as exc:
            raise MemberBindingError(f"Cannot assign {self.path}: {exc}") from exc
