"""Shared fixtures for autofake tests."""

import pytest
from faker import Faker

from autofake.core import auto_faker
from autofake.models.context import AutoGenerateContext
from helpers import RecordingBinder


@pytest.fixture(autouse=True)
def _restore_default_config(monkeypatch):
    """Keep module-level configure() calls from leaking between tests."""
    monkeypatch.setattr(auto_faker, "_default_config", auto_faker.default_config())


@pytest.fixture
def recording_binder():
    return RecordingBinder()


@pytest.fixture
def make_context():
    def _make(**overrides):
        config = auto_faker.default_config().derive(**overrides)
        return AutoGenerateContext(config=config, faker=Faker("en_US"))

    return _make
