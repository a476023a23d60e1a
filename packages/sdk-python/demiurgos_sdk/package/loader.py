"""
Generator Package Loader
========================

Reads a generator directory into a ``GeneratorPackage``:

    Generator.yaml   required, parse failure is fatal
    values.yaml      optional, defaults to {}
    LICENSE          optional raw text
    README.md        optional raw text
    schema.json      optional, unparseable schema is logged and ignored
    files/**         optional, recursive, files only
    templates/*      required, direct children only
    dependencies/*/  optional, each loaded recursively; failures are skipped

Enumeration is sorted so repeated loads of an unchanged directory are identical.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from demiurgos_common import (
    DEPENDENCIES_DIR,
    FILES_DIR,
    LICENSE_FILE,
    MANIFEST_FILE,
    README_FILE,
    SCHEMA_FILE,
    TEMPLATES_DIR,
    VALUES_FILE,
    LoadError,
    ValidationError,
    get_logger,
)
from demiurgos_schema import GeneratorManifest, from_yaml_string

from .models import GeneratorPackage

logger = get_logger(__name__)


# ============================================================================
# Manifest
# ============================================================================


def read_manifest(base_path: Union[str, Path]) -> GeneratorManifest:
    """
    Read and validate only the Generator.yaml of a directory.

    Args:
        base_path: Generator root directory

    Returns:
        Validated manifest

    Raises:
        LoadError: If the manifest is missing, unreadable or invalid
    """
    manifest_path = Path(base_path) / MANIFEST_FILE
    if not manifest_path.is_file():
        raise LoadError(
            f"Manifest not found: {manifest_path}\n"
            f"Every generator needs a {MANIFEST_FILE} at its root."
        )
    try:
        content = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Failed to read manifest: {manifest_path}\nError: {e}") from e

    try:
        return from_yaml_string(content)
    except ValidationError as e:
        raise LoadError(f"Invalid manifest: {manifest_path}\nError: {e.message}") from e


# ============================================================================
# Optional parts
# ============================================================================


def _read_optional_text(path: Path) -> Optional[str]:
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise LoadError(f"File is not valid UTF-8: {path}\nError: {e}") from e


def _read_values(base_path: Path) -> Dict[str, Any]:
    values_path = base_path / VALUES_FILE
    if not values_path.is_file():
        return {}
    try:
        data = yaml.safe_load(values_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise LoadError(f"Values file is not valid UTF-8: {values_path}\nError: {e}") from e
    except yaml.YAMLError as e:
        raise LoadError(f"Invalid YAML in values file: {values_path}\nError: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LoadError(
            f"Values file must contain a mapping: {values_path} "
            f"(got {type(data).__name__})"
        )
    return data


def _read_schema(base_path: Path) -> Optional[Dict[str, Any]]:
    schema_path = base_path / SCHEMA_FILE
    if not schema_path.is_file():
        return None
    try:
        return json.loads(schema_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unparseable schema", path=str(schema_path), error=str(e))
        return None


def _list_files(base_path: Path) -> Optional[Tuple[Path, ...]]:
    files_dir = base_path / FILES_DIR
    if not files_dir.is_dir():
        return None
    files = sorted(p for p in files_dir.rglob("*") if p.is_file())
    return tuple(files) if files else None


def _list_templates(base_path: Path) -> Tuple[Path, ...]:
    templates_dir = base_path / TEMPLATES_DIR
    if not templates_dir.is_dir():
        raise LoadError(
            f"Templates directory not found: {templates_dir}\n"
            f"Every generator needs a {TEMPLATES_DIR}/ directory (it may be empty)."
        )
    return tuple(sorted(p for p in templates_dir.iterdir() if p.is_file()))


def _load_dependencies(base_path: Path) -> Optional[Tuple[GeneratorPackage, ...]]:
    dependencies_dir = base_path / DEPENDENCIES_DIR
    if not dependencies_dir.is_dir():
        return None

    dependencies = []
    for entry in sorted(dependencies_dir.iterdir()):
        if not entry.is_dir():
            continue
        try:
            dependencies.append(load_package(entry))
        except LoadError as e:
            logger.warning("Skipping invalid dependency", path=str(entry), error=e.message)
    return tuple(dependencies)


# ============================================================================
# Package
# ============================================================================


def load_package(base_path: Union[str, Path]) -> GeneratorPackage:
    """
    Load a generator directory.

    Args:
        base_path: Generator root directory

    Returns:
        Immutable GeneratorPackage snapshot

    Raises:
        LoadError: If the directory, manifest, or templates directory is missing,
            or the manifest / values file is invalid

    Example:
        >>> package = load_package("./my-generator")
        >>> package.key
        ('my-generator', '0.0.1')
    """
    path = Path(base_path)
    if not path.is_dir():
        raise LoadError(f"Generator directory not found: {path}")
    path = path.resolve()

    manifest = read_manifest(path)
    try:
        package = GeneratorPackage(
            base_path=path,
            manifest=manifest,
            license=_read_optional_text(path / LICENSE_FILE),
            readme=_read_optional_text(path / README_FILE),
            values=_read_values(path),
            schema=_read_schema(path),
            files=_list_files(path),
            templates=_list_templates(path),
            dependencies=_load_dependencies(path),
        )
    except OSError as e:
        raise LoadError(f"Failed to read generator directory: {path}\nError: {e}") from e

    logger.debug(
        "Loaded generator",
        name=package.name,
        version=package.version,
        files=len(package.files or ()),
        templates=len(package.templates),
    )
    return package
