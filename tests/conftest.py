"""Pytest configuration and shared fixtures for klaw-fx tests."""

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_fx import Some

    return Some('SomeOption')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from klaw_fx import Nothing

    return Nothing


@pytest.fixture
def sample_left():
    """Sample Left value for testing."""
    from klaw_fx import Left

    return Left('some error')


@pytest.fixture
def sample_right():
    """Sample Right value for testing."""
    from klaw_fx import Right

    return Right(23)


@pytest.fixture
def consumed():
    """Record of the elements a lazy input has handed out."""
    return []
