"""Shared test fixtures."""

import pytest

from tests.unit.fakes import FakeClient


@pytest.fixture
def fake_client() -> FakeClient:
    """Return an empty FakeClient; register responses per test."""
    return FakeClient()
