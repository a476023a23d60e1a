"""
demiurgos Schema Package

Pydantic models for the ``Generator.yaml`` manifest plus serialization helpers.

Usage:
    from demiurgos_schema import GeneratorManifest, from_yaml_string, to_yaml_string
"""

from demiurgos_common import ValidationError

from .generator_v1 import (
    Annotations,
    GeneratorDependency,
    GeneratorManifest,
    Maintainer,
    validate_generator_name,
    validate_semver,
)
from .serialization import from_dict, from_yaml_string, to_dict, to_yaml_string

__version__ = "0.1.0"

__all__ = [
    "GeneratorManifest",
    "GeneratorDependency",
    "Maintainer",
    "Annotations",
    "validate_generator_name",
    "validate_semver",
    "to_dict",
    "to_yaml_string",
    "from_dict",
    "from_yaml_string",
    "ValidationError",
]
