from .config import (
    AutoConfig, DEFAULT_LOCALE, DEFAULT_REPEAT_COUNT, DEFAULT_RECURSIVE_DEPTH,
)
from .members import MemberDescriptor
from .context import AutoGenerateContext

__all__ = [
    "AutoConfig", "DEFAULT_LOCALE", "DEFAULT_REPEAT_COUNT", "DEFAULT_RECURSIVE_DEPTH",
    "MemberDescriptor",
    "AutoGenerateContext",
]
