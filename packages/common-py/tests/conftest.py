"""Pytest configuration and fixtures for common-py tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import logging
import sys
import pytest
from pathlib import Path


def pytest_configure(config):
    """Configure pytest with custom markers and path setup."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the package root is in the Python path.

    This makes the package importable whether tests are run from:
    - The package directory (packages/common-py)
    - The project root
    - Or after pip install
    """
    package_root = Path(__file__).parent.parent

    package_root_str = str(package_root)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


@pytest.fixture
def clean_env(monkeypatch):
    """Remove DEMIURGOS_* and XDG variables for the duration of a test."""
    import os
    for key in list(os.environ):
        if key.startswith("DEMIURGOS_") or key == "XDG_DATA_HOME":
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def reset_demiurgos_logging():
    """Undo configure_logging so other tests see the default logger tree."""
    yield
    root = logging.getLogger("demiurgos")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True
