"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest


@pytest.fixture
def t0():
    return datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_description():
    return "Large pothole on the corner of Elm Street and 3rd Avenue, two cars damaged."
