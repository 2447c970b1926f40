"""Shared fixtures."""

import pytest

from tests.helpers import FakeConnection, RecordingTrace


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def trace() -> RecordingTrace:
    return RecordingTrace()
