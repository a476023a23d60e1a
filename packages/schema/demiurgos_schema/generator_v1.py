"""
demiurgos Generator Manifest Schema v1

This module defines Pydantic models for validating ``Generator.yaml`` manifests.

Design Principles:
- Pure validation: Receives dicts, validates structure, returns typed objects
- No file I/O: Reading the manifest from disk is the SDK's responsibility
- Extensible: Accepts unknown fields so newer manifests still load
- Path-safe: name and version become installed store path segments

Usage:
    from demiurgos_schema import GeneratorManifest

    data = yaml.safe_load(manifest_text)
    manifest = GeneratorManifest.model_validate(data)
    install_key = (manifest.name, manifest.version)
"""

import re
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from demiurgos_common import (
    GENERATOR_NAME_PATTERN,
    SEMVER_PATTERN,
    SUPPORTED_API_VERSIONS,
    ValidationError,
)


# =============================================================================
# FIELD VALIDATION HELPERS
# =============================================================================

def validate_generator_name(name: str) -> str:
    """
    Validate a generator name usable as a directory name.

    Raises:
        ValidationError: If the name is empty, contains separators or starts with a dot
    """
    if not name or not name.strip():
        raise ValidationError("Generator name cannot be empty")
    if not re.match(GENERATOR_NAME_PATTERN, name):
        raise ValidationError(
            f"Invalid generator name: '{name}'. "
            "Use letters, numbers, dots, hyphens and underscores, starting with a letter or number."
        )
    return name


def validate_semver(version: str) -> str:
    """
    Validate a semantic version string (MAJOR.MINOR.PATCH[-pre][+build]).

    Raises:
        ValidationError: If the version is empty or not a semantic version
    """
    if not version or not version.strip():
        raise ValidationError("Generator version cannot be empty")
    if not re.match(SEMVER_PATTERN, version):
        raise ValidationError(
            f"Invalid generator version: '{version}'. Expected a semantic version like 1.2.3"
        )
    return version


# =============================================================================
# NESTED MODELS
# =============================================================================

class GeneratorDependency(BaseModel):
    """
    Declared reference to another generator.

    ``source`` is any identifier the source locator understands (local path,
    repository URL, archive URL). Older manifests call it ``url``.
    """
    name: str
    source: str = Field(validation_alias=AliasChoices("source", "url"))
    condition: Optional[str] = None
    tags: Optional[List[str]] = None
    import_values: Optional[List[str]] = Field(default=None, alias="import-values")
    alias: Optional[str] = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("name")
    @classmethod
    def validate_name_format(cls, v: str) -> str:
        return validate_generator_name(v)

    @field_validator("source")
    @classmethod
    def validate_source_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValidationError("Dependency source cannot be empty")
        return v


class Maintainer(BaseModel):
    """Person responsible for a generator."""
    name: str
    email: Optional[str] = None
    url: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class Annotations(BaseModel):
    """Free-form annotations. ``example`` holds a usage example."""
    example: Optional[str] = None

    model_config = ConfigDict(extra="allow")


# =============================================================================
# ROOT MANIFEST MODEL
# =============================================================================

class GeneratorManifest(BaseModel):
    """
    Root model for ``Generator.yaml``.

    ``name`` and ``version`` together form the installed store key.

    Example Generator.yaml:
        apiVersion: v1
        name: rest-api
        version: 1.0.0
        description: FastAPI service skeleton
        keywords: [python, api]
        dependencies:
          - name: docker
            source: https://github.com/acme/docker-generator
        maintainers:
          - name: Alice
            email: alice@example.com
    """
    api_version: str = Field(alias="apiVersion")
    name: str
    version: str
    description: Optional[str] = None
    keywords: Optional[List[str]] = None
    home: Optional[str] = None
    sources: Optional[List[str]] = None
    dependencies: Optional[List[GeneratorDependency]] = None
    maintainers: Optional[List[Maintainer]] = None
    icon: Optional[str] = None
    deprecated: Optional[bool] = None
    annotations: Optional[Annotations] = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("api_version")
    @classmethod
    def validate_api_version_supported(cls, v: str) -> str:
        if v not in SUPPORTED_API_VERSIONS:
            raise ValidationError(
                f"Unsupported apiVersion: '{v}'. "
                f"Supported versions: {', '.join(SUPPORTED_API_VERSIONS)}"
            )
        return v

    @field_validator("name")
    @classmethod
    def validate_name_format(cls, v: str) -> str:
        return validate_generator_name(v)

    @field_validator("version", mode="before")
    @classmethod
    def validate_version_format(cls, v: Any) -> str:
        # YAML reads "1.0" as a float; keep the text the author wrote
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if not isinstance(v, str):
            raise ValidationError(f"Generator version must be a string, got {type(v).__name__}")
        return validate_semver(v)

    @property
    def key(self) -> tuple:
        """Installed store key: (name, version)."""
        return (self.name, self.version)
