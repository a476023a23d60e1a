"""
Manifest serialization utilities.

Converts between ``GeneratorManifest`` objects, plain dicts and YAML text.
Output always uses the on-disk key names (``apiVersion``, ``import-values``)
and omits unset optional fields so written manifests stay minimal.
"""

from typing import Any, Dict

import yaml
from pydantic import ValidationError as PydanticValidationError

from demiurgos_common import ValidationError

from .generator_v1 import GeneratorManifest


def to_dict(manifest: GeneratorManifest) -> Dict[str, Any]:
    """Convert a manifest to a dict keyed the way Generator.yaml is written."""
    return manifest.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_yaml_string(manifest: GeneratorManifest) -> str:
    """Convert a manifest to YAML text, preserving field order."""
    return yaml.safe_dump(to_dict(manifest), default_flow_style=False, sort_keys=False)


def from_dict(data: Dict[str, Any]) -> GeneratorManifest:
    """
    Validate a dict into a manifest.

    Raises:
        ValidationError: If the dict is not a mapping or fails validation
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Manifest must be a mapping, got {type(data).__name__}"
        )
    try:
        return GeneratorManifest.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid manifest structure: {e}") from e


def from_yaml_string(text: str) -> GeneratorManifest:
    """
    Parse and validate YAML manifest text.

    Raises:
        ValidationError: If the YAML is malformed, empty or invalid
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in manifest: {e}") from e
    if data is None:
        raise ValidationError("Manifest is empty")
    return from_dict(data)
