"""Pytest configuration and shared fixtures for tryeither tests."""

import pytest


@pytest.fixture(autouse=True)
def fresh_config():
    """Start every test from an environment-derived configuration."""
    from tryeither._config import reset

    reset()
    yield
    reset()


@pytest.fixture
def sample_right():
    """Sample Right value for testing."""
    from tryeither import Right

    return Right(42)


@pytest.fixture
def sample_left():
    """Sample Left value for testing."""
    from tryeither import Left

    return Left('error')


@pytest.fixture
def sample_success():
    """Sample successful Try for testing."""
    from tryeither import Try

    return Try.success(42)


@pytest.fixture
def sample_failure():
    """Sample failed Try for testing."""
    from tryeither import Try

    return Try.failure(ValueError('test error'))


@pytest.fixture
def counter():
    """A callable that counts its invocations and returns the running count."""

    class Counter:
        def __init__(self) -> None:
            self.calls = 0

        def __call__(self, *args, **kwargs):
            self.calls += 1
            return self.calls

    return Counter()
