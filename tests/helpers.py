"""Shared test types."""

from dataclasses import dataclass

from autofake.core.binder import AutoBinder
from autofake.core.errors import MemberBindingError


@dataclass
class Widget:
    """Three plain string members, the smallest interesting target."""

    a: str = ""
    b: str = ""
    c: str = ""


class RecordingBinder(AutoBinder):
    """AutoBinder that remembers which members it was asked to populate."""

    def __init__(self):
        self.calls = []

    def populate_instance(self, instance, context, members=None):
        if members is not None:
            members = list(members)
            self.calls.append((instance, [m.name for m in members]))
        super().populate_instance(instance, context, members)

    def last_members_for(self, instance):
        for recorded, names in reversed(self.calls):
            if recorded is instance:
                return names
        return None


class FailingBinder(AutoBinder):
    """AutoBinder that writes members in order and raises on `fail_on`."""

    def __init__(self, fail_on):
        self.fail_on = fail_on

    def populate_instance(self, instance, context, members=None):
        if members is None:
            members = self.get_members(type(instance)).values()
        for member in members:
            if member.name == self.fail_on:
                raise MemberBindingError(f"cannot bind {member.path}")
            member.assign(instance, f"auto-{member.name}")
