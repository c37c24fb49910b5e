"""Pytest configuration for integration tests."""

from pathlib import Path

import pytest

HERE = Path(__file__).parent


def pytest_collection_modifyitems(items):
    """Mark everything under integration_tests so it can be deselected with -m."""
    for item in items:
        if HERE in item.path.parents:
            item.add_marker(pytest.mark.integration)
