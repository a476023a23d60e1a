"""
demiurgos Error Classes

Every failure raised by demiurgos packages derives from ``DemiurgosError`` so
callers (the CLI in particular) can catch one type, print ``message`` and exit.

Taxonomy:
    SourceError     - unsupported source shape, transfer failure
    LoadError       - missing/invalid manifest, missing templates directory
    InstallError    - installed store entry could not be written
    ResolveError    - a config document or one of its $ref targets is unusable
    RenderError     - destination conflict, copy failure, renderer failure
    ValidationError - manifest field rejected by the schema
    NotFoundError   - lookup of something that is not installed

Usage:
    from demiurgos_common.errors import LoadError

    raise LoadError(f"Manifest not found: {path}")
"""

from pathlib import Path
from typing import Any, Dict, Optional


class DemiurgosError(Exception):
    """Base class for all demiurgos errors."""

    default_code = "DEMIURGOS_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured logging or JSON output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


class ValidationError(DemiurgosError):
    """Raised when a manifest or input value fails validation."""

    default_code = "VALIDATION_ERROR"


class SourceError(DemiurgosError):
    """Raised when a generator source cannot be classified or staged."""

    default_code = "SOURCE_ERROR"


class LoadError(DemiurgosError):
    """Raised when a directory cannot be read as a generator package."""

    default_code = "LOAD_ERROR"


class InstallError(DemiurgosError):
    """Raised when a generator cannot be written into the installed store."""

    default_code = "INSTALL_ERROR"


class ResolveError(DemiurgosError):
    """
    Raised (or collected) when a config document cannot be resolved.

    ``path`` names the offending file; ``entity`` names the entity whose
    reference failed, when the error concerns a single ``$ref``.
    """

    default_code = "RESOLVE_ERROR"

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        entity: Optional[str] = None,
    ):
        super().__init__(message)
        self.path = path
        self.entity = entity

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["path"] = str(self.path) if self.path is not None else None
        data["entity"] = self.entity
        return data


class RenderError(DemiurgosError):
    """Raised when files cannot be copied or templates cannot be rendered."""

    default_code = "RENDER_ERROR"


class NotFoundError(DemiurgosError):
    """Raised when a requested generator is not installed."""

    default_code = "NOT_FOUND"


__all__ = [
    "DemiurgosError",
    "ValidationError",
    "SourceError",
    "LoadError",
    "InstallError",
    "ResolveError",
    "RenderError",
    "NotFoundError",
]
