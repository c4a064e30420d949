"""Test configuration and fixtures for undox tests.

This module provides shared reducers and fixtures for all tests.
"""

import pytest

from undox import get_action_type


def _payload(action):
    if isinstance(action, dict):
        return action.get("payload")
    return getattr(action, "payload", None)


def counter_reducer(state, action):
    """Integer counter starting at 0."""
    if state is None:
        state = 0

    action_type = get_action_type(action)
    if action_type == "increment":
        return state + 1
    if action_type == "decrement":
        return state - 1
    if action_type == "add":
        return state + _payload(action)
    if action_type == "set":
        return _payload(action)
    if action_type == "tick":
        return state + 10
    if action_type == "explode":
        raise RuntimeError("reducer failure")
    return state


def todo_reducer(state, action):
    """List of todo titles."""
    if state is None:
        state = []

    action_type = get_action_type(action)
    if action_type == "add_todo":
        return [*state, _payload(action)]
    if action_type == "clear":
        return []
    return state


@pytest.fixture
def counter():
    """The counter reducer."""
    return counter_reducer


@pytest.fixture
def todos():
    """The todo reducer."""
    return todo_reducer


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (command line, files)"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (no external dependencies)"
    )


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
