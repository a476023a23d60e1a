"""
Generator Package Model
=======================

In-memory snapshot of a generator directory. Built only by the package loader
and never mutated afterwards; nested dependencies are owned child packages.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple

from demiurgos_common import FILES_DIR, TEMPLATES_DIR
from demiurgos_schema import GeneratorManifest, to_dict


@dataclass(frozen=True)
class GeneratorPackage:
    """
    A loaded generator package.

    Attributes:
        base_path: Root directory of the package
        manifest: Parsed Generator.yaml
        license: Raw LICENSE text, if present
        readme: Raw README.md text, if present
        values: Default configuration (empty mapping when values.yaml is absent)
        schema: Parsed schema.json, if present (not evaluated)
        files: Sorted absolute paths under files/, or None when there are none
        templates: Sorted absolute paths of the direct children of templates/
        dependencies: Nested packages from dependencies/, or None when that
            directory is absent
    """

    base_path: Path
    manifest: GeneratorManifest
    license: Optional[str] = None
    readme: Optional[str] = None
    values: Dict[str, Any] = field(default_factory=dict)
    schema: Optional[Dict[str, Any]] = None
    files: Optional[Tuple[Path, ...]] = None
    templates: Tuple[Path, ...] = ()
    dependencies: Optional[Tuple["GeneratorPackage", ...]] = None

    @property
    def name(self) -> str:
        return self.manifest.name

    @property
    def version(self) -> str:
        return self.manifest.version

    @property
    def key(self) -> Tuple[str, str]:
        """Installed store key."""
        return (self.manifest.name, self.manifest.version)

    @property
    def files_root(self) -> Path:
        return self.base_path / FILES_DIR

    @property
    def templates_root(self) -> Path:
        return self.base_path / TEMPLATES_DIR

    def iter_packages(self) -> Iterator["GeneratorPackage"]:
        """Yield this package, then every nested dependency depth-first."""
        yield self
        for dependency in self.dependencies or ():
            yield from dependency.iter_packages()

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly summary of the loaded package, for logs and debugging."""
        return {
            "base_path": str(self.base_path),
            "manifest": to_dict(self.manifest),
            "has_license": self.license is not None,
            "has_readme": self.readme is not None,
            "values": self.values,
            "schema": self.schema,
            "files": [str(p) for p in self.files] if self.files is not None else None,
            "templates": [str(p) for p in self.templates],
            "dependencies": (
                [dep.to_dict() for dep in self.dependencies]
                if self.dependencies is not None
                else None
            ),
        }

    def __repr__(self) -> str:
        return f"GeneratorPackage(name={self.name!r}, version={self.version!r}, base_path={str(self.base_path)!r})"
