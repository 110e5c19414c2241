"""Pytest configuration and shared fixtures for resulting tests."""

import logging

import pytest


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from resulting import success

    return success('value')


@pytest.fixture
def sample_error():
    """A single error instance, so identity checks are meaningful."""
    return ValueError('error')


@pytest.fixture
def sample_failure(sample_error):
    """Sample Failure value for testing."""
    from resulting import failure

    return failure(sample_error)


@pytest.fixture
def fresh_config(monkeypatch):
    """Run a test with no configuration set by init()."""
    import resulting._config

    monkeypatch.setattr(resulting._config, '_config', None)


@pytest.fixture
def restore_root_logger():
    """Undo configure_logging() changes to the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
