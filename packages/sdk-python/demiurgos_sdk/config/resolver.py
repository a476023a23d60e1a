"""
Config Resolver
===============

Loads the JSON configuration document used as template context and resolves
its entity references.

Reference rules:
- Only values directly under the top-level ``entities`` mapping are inspected.
- A value is a reference only when it is exactly ``{"$ref": "<string>"}``.
  Objects with extra keys, or a non-string ``$ref``, are left untouched.
- The string is a path relative to the config file's directory; the loaded
  JSON document replaces the reference object.
- A missing or unparseable target is reported for that entity and the
  reference object is kept; the remaining entities are still resolved.
- Resolution is a single pass. References inside a loaded document stay as
  they are.

After dereferencing, ``outputFolder`` is injected at the top level so no
referenced document can override it.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from demiurgos_common import ENTITIES_KEY, OUTPUT_FOLDER_KEY, REF_KEY, ResolveError, get_logger

logger = get_logger(__name__)


@dataclass
class ResolvedConfig:
    """Resolved context plus the per-entity reference errors encountered."""

    context: Dict[str, Any]
    errors: List[ResolveError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def read_json(path: Union[str, Path]) -> Any:
    """
    Read any JSON document.

    Raises:
        ResolveError: If the file is missing, unreadable or not valid JSON
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ResolveError(f"File not found: {file_path}", path=file_path)
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ResolveError(f"Invalid JSON in {file_path}: {e}", path=file_path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ResolveError(f"Failed to read {file_path}: {e}", path=file_path) from e


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a config document, which must be a JSON object.

    Raises:
        ResolveError: If the file is missing, not valid JSON, or not an object
    """
    data = read_json(path)
    if not isinstance(data, dict):
        raise ResolveError(
            f"Config must be a JSON object: {path} (got {type(data).__name__})",
            path=Path(path),
        )
    return data


def is_reference(value: Any) -> bool:
    """True only for an object whose single key is ``$ref`` with a string value."""
    return (
        isinstance(value, dict)
        and len(value) == 1
        and REF_KEY in value
        and isinstance(value[REF_KEY], str)
    )


def dereference_config(config: Dict[str, Any], parent_dir: Union[str, Path]) -> List[ResolveError]:
    """
    Replace ``entities`` references in place.

    Args:
        config: Parsed config document (mutated)
        parent_dir: Directory references are relative to

    Returns:
        One ResolveError per reference that could not be resolved

    Example:
        >>> config = {"entities": {"user": {"$ref": "user.json"}}}
        >>> dereference_config(config, Path("configs"))
        []
        >>> config["entities"]["user"]
        {'name': 'User', 'fields': [...]}
    """
    entities = config.get(ENTITIES_KEY)
    if not isinstance(entities, dict):
        logger.debug("No entities mapping to dereference")
        return []

    base = Path(parent_dir)
    errors: List[ResolveError] = []
    for key, value in entities.items():
        if not is_reference(value):
            continue
        reference = value[REF_KEY]
        target = base / reference
        logger.debug("Loading entity reference", entity=key, reference=reference)
        try:
            entities[key] = read_json(target)
        except ResolveError as e:
            e.entity = key
            logger.error("Unresolved entity reference", entity=key, path=str(target), error=e.message)
            errors.append(e)
    return errors


def resolve_config(
    path: Union[str, Path],
    output_folder: Optional[Union[str, Path]] = None,
) -> ResolvedConfig:
    """
    Load a config document, dereference its entities and inject ``outputFolder``.

    Args:
        path: Config JSON file
        output_folder: Destination directory; stored as an absolute path string

    Returns:
        ResolvedConfig (reference failures are in ``errors``, not raised)

    Raises:
        ResolveError: If the config document itself cannot be loaded
    """
    config_path = Path(path)
    context = load_config(config_path)
    errors = dereference_config(context, config_path.resolve().parent)
    if output_folder is not None:
        context[OUTPUT_FOLDER_KEY] = str(Path(output_folder).resolve())
    return ResolvedConfig(context=context, errors=errors)


__all__ = [
    "ResolvedConfig",
    "read_json",
    "load_config",
    "is_reference",
    "dereference_config",
    "resolve_config",
]
