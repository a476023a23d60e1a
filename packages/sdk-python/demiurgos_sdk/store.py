"""
Installed Generator Store
=========================

Local directory tree of installed generators, keyed by name and version:

    <root>/<name>/<version>/Generator.yaml
                            values.yaml
                            templates/...

An entry is created on first install and never overwritten implicitly:
installing the same (name, version) again is a successful no-op unless
``force=True`` is passed. Claiming the destination is an atomic ``mkdir`` so
two concurrent installs of the same key resolve to one writer and one no-op.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from demiurgos_common import InstallError, LoadError, NotFoundError, get_logger
from demiurgos_common.constants import IGNORED_INSTALL_NAMES

from .package import GeneratorPackage, load_package, read_manifest
from .versioning import version_sort_key

logger = get_logger(__name__)


@dataclass(frozen=True)
class InstallResult:
    """Outcome of an install call."""

    name: str
    version: str
    path: Path
    created: bool


@dataclass(frozen=True)
class InstalledGenerator:
    """One entry of the installed store."""

    name: str
    version: str
    path: Path


class GeneratorStore:
    """
    Installed generator store rooted at an explicit directory.

    Example:
        >>> store = GeneratorStore(settings.generators_dir)
        >>> result = store.install(staged.root)
        >>> package = store.get(result.name, result.version)
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"GeneratorStore(root={str(self.root)!r})"

    # -- Lookup ------------------------------------------------------------

    def path_for(self, name: str, version: str) -> Path:
        return self.root / name / version

    def exists(self, name: str, version: str) -> bool:
        return self.path_for(name, version).is_dir()

    def get(self, name: str, version: Optional[str] = None) -> GeneratorPackage:
        """
        Load an installed generator. Without a version, the latest is used.

        Raises:
            NotFoundError: If the generator (or that version) is not installed
            LoadError: If the installed directory is not a valid generator
        """
        if version is None:
            version = self.latest(name)
        path = self.path_for(name, version)
        if not path.is_dir():
            raise NotFoundError(
                f"Generator not installed: {name} {version}\n"
                f"Looked in: {path}"
            )
        return load_package(path)

    def versions(self, name: str) -> List[str]:
        """Installed versions of ``name``, lowest to highest."""
        name_dir = self.root / name
        if not name_dir.is_dir():
            return []
        return sorted((p.name for p in name_dir.iterdir() if p.is_dir()), key=version_sort_key)

    def latest(self, name: str) -> str:
        """
        Highest installed version of ``name``.

        Raises:
            NotFoundError: If no version is installed
        """
        versions = self.versions(name)
        if not versions:
            raise NotFoundError(f"Generator not installed: {name}")
        return versions[-1]

    def list(self) -> List[InstalledGenerator]:
        """Every installed entry, sorted by name then version."""
        if not self.root.is_dir():
            return []
        entries = []
        for name_dir in sorted(p for p in self.root.iterdir() if p.is_dir()):
            for version in self.versions(name_dir.name):
                entries.append(
                    InstalledGenerator(
                        name=name_dir.name, version=version, path=name_dir / version
                    )
                )
        return entries

    # -- Mutation ----------------------------------------------------------

    def install(self, staged_path: Union[str, Path], force: bool = False) -> InstallResult:
        """
        Copy a staged generator into ``root/name/version``.

        Only the manifest is read; the rest of the tree is copied as is.

        Args:
            staged_path: Directory holding Generator.yaml at its top level
            force: Replace an existing entry instead of leaving it untouched

        Returns:
            InstallResult with ``created=False`` when the entry already existed

        Raises:
            InstallError: If the manifest is unreadable or the destination
                cannot be written
        """
        staged = Path(staged_path)
        try:
            manifest = read_manifest(staged)
        except LoadError as e:
            raise InstallError(f"Cannot install from {staged}: {e.message}") from e

        name, version = manifest.name, manifest.version
        destination = self.path_for(name, version)
        logger.info(
            "Installing generator", name=name, version=version, destination=str(destination)
        )

        if force and destination.exists():
            logger.info("Replacing installed generator", name=name, version=version)
            try:
                shutil.rmtree(destination)
            except OSError as e:
                raise InstallError(f"Failed to remove existing install {destination}: {e}") from e

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.mkdir()
        except FileExistsError:
            logger.info("Generator already installed", name=name, version=version)
            return InstallResult(name=name, version=version, path=destination, created=False)
        except OSError as e:
            raise InstallError(f"Cannot create install directory {destination}: {e}") from e

        try:
            shutil.copytree(
                staged,
                destination,
                dirs_exist_ok=True,
                ignore=shutil.ignore_patterns(*IGNORED_INSTALL_NAMES),
            )
        except (OSError, shutil.Error) as e:
            shutil.rmtree(destination, ignore_errors=True)
            raise InstallError(f"Failed to copy {staged} to {destination}: {e}") from e

        return InstallResult(name=name, version=version, path=destination, created=True)

    def uninstall(self, name: str, version: str) -> Path:
        """
        Remove an installed entry (and the name directory once empty).

        Raises:
            NotFoundError: If the entry does not exist
            InstallError: If it cannot be removed
        """
        path = self.path_for(name, version)
        if not path.is_dir():
            raise NotFoundError(f"Generator not installed: {name} {version}")
        try:
            shutil.rmtree(path)
            if not any(path.parent.iterdir()):
                path.parent.rmdir()
        except OSError as e:
            raise InstallError(f"Failed to remove {path}: {e}") from e
        logger.info("Uninstalled generator", name=name, version=version)
        return path


__all__ = ["GeneratorStore", "InstallResult", "InstalledGenerator"]
