"""Pytest configuration and fixtures for CLI tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import json
import logging
import sys
import pytest
from pathlib import Path
from typer.testing import CliRunner

from demiurgos_common import get_settings


def pytest_configure(config):
    """Configure pytest with custom markers and path setup."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the package root is in the Python path.

    This makes the package importable whether tests are run from:
    - The package directory (packages/cli)
    - The project root
    - Or after pip install
    """
    package_root = Path(__file__).parent.parent

    package_root_str = str(package_root)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Point the installed store at a temporary data directory."""
    data = tmp_path / "data"
    monkeypatch.setenv("DEMIURGOS_DATA_DIR", str(data))
    monkeypatch.delenv("DEMIURGOS_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield data
    get_settings.cache_clear()
    # The CLI callback installs a handler on the runner's stream
    root = logging.getLogger("demiurgos")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_generator(tmp_path):
    """A generator with one static file, one partial and one template."""
    root = tmp_path / "gen"
    (root / "templates").mkdir(parents=True)
    (root / "files").mkdir()
    (root / "Generator.yaml").write_text("apiVersion: v1\nname: greeter\nversion: 1.0.0\n")
    (root / "values.yaml").write_text("greeting: Hello\n")
    (root / "files" / "static.txt").write_text("static")
    (root / "templates" / "_macros.tpl").write_text(
        "{% macro shout(x) %}{{ x | upper }}{% endmacro %}"
    )
    (root / "templates" / "hello.tpl").write_text(
        "---\nto: {{ entities.user.name | snake_case }}.txt\n---\n"
        '{% import "_macros.tpl" as m %}\n'
        "{{ greeting }} {{ m.shout(entities.user.name) }}\n"
    )
    return root


@pytest.fixture
def config_file(tmp_path):
    """Config document whose user entity is a $ref."""
    (tmp_path / "user.json").write_text(json.dumps({"name": "Ada"}))
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"entities": {"user": {"$ref": "user.json"}}}))
    return path
