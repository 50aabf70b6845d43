"""Pytest configuration and shared fixtures for fnkit tests."""

import logging

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from fnkit import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from fnkit import Nothing

    return Nothing


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from fnkit import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from fnkit import Err

    return Err(ValueError('test error'))


@pytest.fixture
def captured_events():
    """Enable DEBUG logging for fnkit and collect every event dict.

    The fnkit logger and the hook registry are restored afterwards.
    """
    from fnkit import add_log_hook, clear_log_hooks, configure_logging

    logger = logging.getLogger('fnkit')
    saved = (list(logger.handlers), logger.level, logger.propagate)

    events = []
    configure_logging('DEBUG', json_output=True)
    add_log_hook(events.append)
    yield events

    clear_log_hooks()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


@pytest.fixture
def reset_config():
    """Reset the global fnkit config before and after a test."""
    import fnkit._config

    fnkit._config._config = None
    yield
    fnkit._config._config = None
