"""Error kinds raised by the generation engine and its collaborators."""


class AutoFakeError(Exception):
    """Base class for generation failures."""

    pass


class GeneratorNotFoundError(AutoFakeError):
    """Raised when no generator can produce a value for a type, or its annotations do not resolve."""

    pass


class UnknownMemberError(AutoFakeError, ValueError):
    """Raised when a rule targets a member the type does not have."""

    pass


class MemberBindingError(AutoFakeError):
    """Raised when a generated value cannot be written to a member."""

    pass
