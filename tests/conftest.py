"""Pytest configuration and shared fixtures for scipio tests."""

import pytest
from scipio._config import reset
from scipio._logging import clear_log_hooks


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from scipio import Success

    return Success(42)


@pytest.fixture
def sample_error():
    """Sample exception for testing."""
    return ValueError('test error')


@pytest.fixture
def sample_failure(sample_error):
    """Sample Failure wrapping sample_error."""
    from scipio import Failure

    return Failure(sample_error)


@pytest.fixture
def clean_config(monkeypatch):
    """Start and end a test with no configuration and no log hooks."""
    monkeypatch.delenv('SCIPIO_LOG_LEVEL', raising=False)
    monkeypatch.delenv('SCIPIO_LOG_FORMAT', raising=False)
    reset()
    clear_log_hooks()
    yield
    reset()
    clear_log_hooks()
