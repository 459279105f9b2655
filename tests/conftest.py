"""Pytest configuration and shared fixtures for optval tests."""

import pytest


@pytest.fixture
def sample_present():
    """Sample Present value for testing."""
    from optval import Present

    return Present('mary')


@pytest.fixture
def sample_absent():
    """Sample Absent value for testing."""
    from optval import Absent

    return Absent


@pytest.fixture
def record():
    """A record with a valid email and no position set."""
    from optval import Record

    return Record('mary', 'mary@gmail.com')
