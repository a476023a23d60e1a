"""Pytest configuration and fixtures for schema tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
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
    - The package directory (packages/schema)
    - The project root
    - Or after pip install
    """
    package_root = Path(__file__).parent.parent

    package_root_str = str(package_root)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


@pytest.fixture
def minimal_manifest():
    """Smallest valid Generator.yaml content as a dict"""
    return {
        "apiVersion": "v1",
        "name": "rest-api",
        "version": "1.0.0",
    }


@pytest.fixture
def full_manifest():
    """Generator.yaml using every documented field"""
    return {
        "apiVersion": "v1",
        "name": "rest-api",
        "version": "1.2.3-beta.1+build.5",
        "description": "FastAPI service skeleton",
        "keywords": ["python", "api"],
        "home": "https://example.com/rest-api",
        "sources": ["https://github.com/acme/rest-api"],
        "dependencies": [
            {
                "name": "docker",
                "source": "https://github.com/acme/docker-generator",
                "condition": "docker.enabled",
                "tags": ["ops"],
                "import-values": ["image"],
                "alias": "container",
            }
        ],
        "maintainers": [{"name": "Alice", "email": "alice@example.com"}],
        "icon": "https://example.com/icon.png",
        "deprecated": False,
        "annotations": {"example": "demiurgos generate --name rest-api"},
    }
