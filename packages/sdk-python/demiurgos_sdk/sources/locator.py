"""
Source Locator
==============

Classifies a generator source identifier and stages it into a local directory
whose top level holds ``Generator.yaml``.

Classification rules (checked in order):
1. An existing local directory is used directly (no copy).
2. A URL ending in an archive suffix (.zip, .tar.gz, .tgz) is downloaded and
   extracted, including archive links on hosted repositories.
3. A URL on a known repository host is cloned.
4. Anything else is rejected with ``SourceError``.

Remote sources are staged into a temporary directory that lives exactly as
long as the ``StagedSource`` context. Nothing is ever written to the
installed store from here.
"""

import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from demiurgos_common import MANIFEST_FILE, SourceError, get_logger
from demiurgos_common.constants import (
    DOWNLOAD_FILE_STEM,
    TAR_GZ_SUFFIXES,
    VCS_HOST_PREFIXES,
    ZIP_SUFFIXES,
)

from .fetchers import (
    ArchiveDownloader,
    ArchiveExtractor,
    ArchiveKind,
    DefaultArchiveExtractor,
    GitCloner,
    HttpDownloader,
    RepositoryCloner,
)

logger = get_logger(__name__)


class SourceKind(str, Enum):
    """Shape of a source identifier."""

    LOCAL = "local"
    GIT = "git"
    ZIP = "zip"
    TAR_GZ = "tar.gz"


# ============================================================================
# Classification
# ============================================================================


def _archive_kind(source: str) -> Optional[SourceKind]:
    lowered = source.lower().split("?", 1)[0]
    if any(lowered.endswith(suffix) for suffix in ZIP_SUFFIXES):
        return SourceKind.ZIP
    if any(lowered.endswith(suffix) for suffix in TAR_GZ_SUFFIXES):
        return SourceKind.TAR_GZ
    return None


def _is_vcs_url(source: str) -> bool:
    return any(
        source == prefix or source.startswith(prefix + "/") for prefix in VCS_HOST_PREFIXES
    )


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def classify_source(source: str) -> SourceKind:
    """
    Classify a source identifier without touching the network.

    Args:
        source: Local path, repository URL or archive URL

    Returns:
        The detected SourceKind

    Raises:
        SourceError: If the identifier matches no supported shape

    Examples:
        >>> classify_source("https://github.com/acme/rest-api")
        <SourceKind.GIT: 'git'>
        >>> classify_source("https://github.com/acme/rest-api/archive/main.zip")
        <SourceKind.ZIP: 'zip'>
    """
    if not source or not source.strip():
        raise SourceError("Source cannot be empty")

    if not _is_url(source) and Path(source).is_dir():
        return SourceKind.LOCAL

    archive_kind = _archive_kind(source) if _is_url(source) else None
    if archive_kind is not None:
        return archive_kind

    if _is_vcs_url(source):
        return SourceKind.GIT

    raise SourceError(
        f"Unsupported source: {source}\n"
        "Expected an existing local directory, a repository URL on "
        f"{', '.join(VCS_HOST_PREFIXES)}, or a URL to a .zip / .tar.gz archive."
    )


# ============================================================================
# Staging
# ============================================================================


def find_generator_root(staging_dir: Path) -> Path:
    """
    Locate the directory holding Generator.yaml inside a staging directory.

    Hosted archive links wrap the repository in one top-level directory
    (``repo-main/``); in that case the single subdirectory is the root.
    """
    if (staging_dir / MANIFEST_FILE).is_file():
        return staging_dir
    children = [p for p in staging_dir.iterdir() if not p.name.startswith(".")]
    if len(children) == 1 and children[0].is_dir() and (children[0] / MANIFEST_FILE).is_file():
        return children[0]
    return staging_dir


@dataclass
class StagedSource:
    """
    A staged generator source.

    Use as a context manager; the temporary directory of a remote source is
    removed on exit. Local sources own no temporary directory.
    """

    source: str
    kind: SourceKind
    root: Path
    _tempdir: Optional[tempfile.TemporaryDirectory] = None

    @property
    def is_temporary(self) -> bool:
        return self._tempdir is not None

    def cleanup(self) -> None:
        if self._tempdir is not None:
            self._tempdir.cleanup()
            self._tempdir = None

    def __enter__(self) -> "StagedSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()


class SourceLocator:
    """
    Stages generator sources using injectable transfer collaborators.

    Example:
        >>> locator = SourceLocator()
        >>> with locator.stage("https://github.com/acme/rest-api") as staged:
        ...     package = load_package(staged.root)
    """

    def __init__(
        self,
        cloner: Optional[RepositoryCloner] = None,
        downloader: Optional[ArchiveDownloader] = None,
        extractor: Optional[ArchiveExtractor] = None,
        temp_root: Optional[Path] = None,
    ):
        self.cloner = cloner or GitCloner()
        self.downloader = downloader or HttpDownloader()
        self.extractor = extractor or DefaultArchiveExtractor()
        self.temp_root = temp_root

    def stage(self, source: str) -> StagedSource:
        """
        Stage ``source`` and return a StagedSource.

        Raises:
            SourceError: If the source is unsupported or the transfer fails
        """
        kind = classify_source(source)
        if kind == SourceKind.LOCAL:
            logger.debug("Source is a local directory", source=source)
            return StagedSource(source=source, kind=kind, root=Path(source).resolve())

        tempdir = tempfile.TemporaryDirectory(
            prefix="demiurgos-", dir=str(self.temp_root) if self.temp_root else None
        )
        staging_dir = Path(tempdir.name)
        logger.debug("Created staging directory", path=str(staging_dir))
        try:
            if kind == SourceKind.GIT:
                logger.info("Cloning repository", source=source)
                self.cloner.clone(source, staging_dir)
            else:
                logger.info("Downloading archive", source=source)
                self._download_and_extract(source, kind, staging_dir)
        except BaseException:
            tempdir.cleanup()
            raise

        return StagedSource(
            source=source,
            kind=kind,
            root=find_generator_root(staging_dir),
            _tempdir=tempdir,
        )

    def _download_and_extract(self, source: str, kind: SourceKind, staging_dir: Path) -> None:
        archive_kind = ArchiveKind.ZIP if kind == SourceKind.ZIP else ArchiveKind.TAR_GZ
        payload = self.downloader.get(source)
        # Keep the archive outside the extraction target
        archive_path = staging_dir.parent / f"{staging_dir.name}-{DOWNLOAD_FILE_STEM}.{archive_kind.value}"
        try:
            archive_path.write_bytes(payload)
            self.extractor.extract(archive_path, staging_dir, archive_kind)
        except OSError as e:
            raise SourceError(f"Failed to stage archive from {source}\nError: {e}") from e
        finally:
            archive_path.unlink(missing_ok=True)


def locate_source(source: str, locator: Optional[SourceLocator] = None) -> StagedSource:
    """Convenience wrapper around ``SourceLocator().stage(source)``."""
    return (locator or SourceLocator()).stage(source)


__all__ = [
    "SourceKind",
    "StagedSource",
    "SourceLocator",
    "classify_source",
    "find_generator_root",
    "locate_source",
]
