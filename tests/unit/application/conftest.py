"""Fixtures for use-case tests: an empty fake store and a pinned clock."""

import pytest

from fakes import FakeStore, FixedClock


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def clock(t0):
    return FixedClock(t0)
