# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import getLogger

# Third party imports
import pytest

# Local imports
from json_workbench.application.validation import SchemaCache


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - just reset logging"""
    # Reset logging to avoid handler conflicts
    root_logger = getLogger()
    # Remove all handlers except the ones pytest installs for capturing
    for handler in root_logger.handlers[:]:
        if type(handler).__module__.startswith("_pytest"):
            continue
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    yield


@pytest.fixture
def schema_cache():
    """A private schema cache so tests never share compiled validators"""
    return SchemaCache(max_size=8)


@pytest.fixture
def sample_document():
    """A small multi-line document used by location and diff tests"""
    return (
        "{\n"
        '  "name": "widget",\n'
        '  "tags": ["a", "b"],\n'
        '  "items": [\n'
        '    {"id": 1, "label": "first"},\n'
        '    {"id": 2, "label": "second"}\n'
        "  ]\n"
        "}"
    )
