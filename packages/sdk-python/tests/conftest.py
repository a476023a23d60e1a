"""Pytest configuration and fixtures for SDK tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import sys
import pytest
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


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
    """Ensure the package root and tests directory are in the Python path.

    This makes fixtures importable whether tests are run from:
    - The package directory (packages/sdk-python)
    - The project root
    - Or after pip install
    """
    package_root = Path(__file__).parent.parent
    tests_root = Path(__file__).parent

    package_root_str = str(package_root)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    tests_root_str = str(tests_root)
    if tests_root_str not in sys.path:
        sys.path.insert(0, tests_root_str)

    yield


def write_generator(
    root: Path,
    name: str = "sample",
    version: str = "1.0.0",
    templates: Optional[Dict[str, str]] = None,
    files: Optional[Dict[str, Any]] = None,
    values: Optional[Dict[str, Any]] = None,
    extra_manifest: Optional[Dict[str, Any]] = None,
) -> Path:
    """Write a generator directory and return its root.

    ``files`` maps paths relative to ``files/`` to str or bytes content.
    """
    root.mkdir(parents=True, exist_ok=True)
    manifest = {"apiVersion": "v1", "name": name, "version": version}
    manifest.update(extra_manifest or {})
    (root / "Generator.yaml").write_text(yaml.safe_dump(manifest, sort_keys=False))

    if values is not None:
        (root / "values.yaml").write_text(yaml.safe_dump(values))

    templates_dir = root / "templates"
    templates_dir.mkdir(exist_ok=True)
    for template_name, text in (templates or {}).items():
        (templates_dir / template_name).write_text(text)

    for relative, content in (files or {}).items():
        target = root / "files" / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content)
    return root


class RecordingRenderer:
    """Template renderer double that records every call."""

    def __init__(self, fail_on: Optional[str] = None):
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.fail_on = fail_on

    def render(self, template_text: str, context: Dict[str, Any]) -> str:
        if self.fail_on is not None and self.fail_on in template_text:
            raise RuntimeError(f"cannot render {self.fail_on}")
        self.calls.append((template_text, context))
        return f"rendered:{len(self.calls)}"


@pytest.fixture
def make_generator(tmp_path):
    """Factory building generator directories under tmp_path."""
    def _make(relative: str = "sample", **kwargs) -> Path:
        return write_generator(tmp_path / relative, **kwargs)
    return _make


@pytest.fixture
def recording_renderer():
    """Fresh RecordingRenderer"""
    return RecordingRenderer()


@pytest.fixture
def failing_renderer():
    """Factory for renderers failing on templates containing a marker"""
    return RecordingRenderer
