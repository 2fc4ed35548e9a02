"""Generation configuration records."""

from __future__ import annotations
from typing import Any
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_LOCALE = "en_US"
DEFAULT_REPEAT_COUNT = 3
DEFAULT_RECURSIVE_DEPTH = 2


class AutoConfig(BaseModel):
    """
    Settings for one generation request.

    Records are never mutated; `derive()` clones a record with overrides
    and keeps a link to the record it was cloned from.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    locale: str = DEFAULT_LOCALE
    binder: Any = None                          # AutoBinder-like object
    repeat_count: int = Field(default=DEFAULT_REPEAT_COUNT, ge=0)
    recursive_depth: int = Field(default=DEFAULT_RECURSIVE_DEPTH, ge=0)
    skip_types: tuple[Any, ...] = ()
    skip_members: tuple[str, ...] = ()          # "TypeName.member"
    parent: AutoConfig | None = None

    def derive(self, **overrides: Any) -> AutoConfig:
        """Clone this record, applying every override that is not None."""
        update = {k: v for k, v in overrides.items() if v is not None}
        for key in ("skip_types", "skip_members"):
            if key in update:
                update[key] = tuple(update[key])
        unknown = set(update) - set(type(self).model_fields)
        if unknown:
            raise TypeError(f"Unknown config options: {sorted(unknown)}")
        update["parent"] = self
        return self.model_copy(update=update)

    def skips(self, member_type: Any, path: str) -> bool:
        return member_type in self.skip_types or path in self.skip_members
