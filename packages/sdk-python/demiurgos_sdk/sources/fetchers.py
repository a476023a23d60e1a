"""
Source Transfer Collaborators
=============================

The source locator never speaks git or HTTP itself. It drives three small
collaborators, each replaceable in tests:

- RepositoryCloner: clone(url, dest_dir)
- ArchiveDownloader: get(url) -> bytes
- ArchiveExtractor: extract(archive_path, dest_dir, kind)

Default implementations shell out to ``git``, use ``requests`` for downloads
and the standard library archive modules for decoding.
"""

import subprocess
import tarfile
import zipfile
from enum import Enum
from pathlib import Path
from typing import Protocol

import requests

from demiurgos_common import SourceError, get_logger
from demiurgos_common.constants import DEFAULT_GIT_EXECUTABLE, DEFAULT_HTTP_TIMEOUT

logger = get_logger(__name__)


class ArchiveKind(str, Enum):
    """Archive formats the extractor can decode."""

    ZIP = "zip"
    TAR_GZ = "tar.gz"


# ============================================================================
# Protocols
# ============================================================================


class RepositoryCloner(Protocol):
    def clone(self, url: str, dest_dir: Path) -> None: ...


class ArchiveDownloader(Protocol):
    def get(self, url: str) -> bytes: ...


class ArchiveExtractor(Protocol):
    def extract(self, archive_path: Path, dest_dir: Path, kind: ArchiveKind) -> None: ...


# ============================================================================
# Default implementations
# ============================================================================


class GitCloner:
    """Clone repositories with the ``git`` executable (shallow clone)."""

    def __init__(self, executable: str = DEFAULT_GIT_EXECUTABLE):
        self.executable = executable

    def clone(self, url: str, dest_dir: Path) -> None:
        """
        Clone ``url`` into ``dest_dir``.

        Raises:
            SourceError: If git is missing or the clone fails
        """
        cmd = [self.executable, "clone", "--depth", "1", url, str(dest_dir)]
        logger.debug("Cloning repository", url=url, dest=str(dest_dir))
        try:
            subprocess.run(cmd, check=True, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise SourceError(
                f"git executable not found: {self.executable}\n"
                f"Install git or set DEMIURGOS_GIT_EXECUTABLE."
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise SourceError(f"Failed to clone {url}\nError: {stderr or e}") from e


class HttpDownloader:
    """Download archives over HTTP(S) with ``requests``."""

    def __init__(self, timeout: int = DEFAULT_HTTP_TIMEOUT, session: requests.Session = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def get(self, url: str) -> bytes:
        """
        Fetch ``url`` and return the raw body.

        Raises:
            SourceError: On connection errors, timeouts or non-2xx responses
        """
        logger.debug("Downloading archive", url=url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise SourceError(f"Failed to download {url}\nError: {e}") from e
        return response.content


class DefaultArchiveExtractor:
    """
    Decode zip and gzip-compressed tar archives.

    Members that would land outside ``dest_dir`` (absolute paths, ``..``
    segments, links) are refused rather than silently skipped.
    """

    def extract(self, archive_path: Path, dest_dir: Path, kind: ArchiveKind) -> None:
        """
        Raises:
            SourceError: If the archive is corrupt or contains unsafe members
        """
        dest_dir = Path(dest_dir).resolve()
        try:
            if kind == ArchiveKind.ZIP:
                self._extract_zip(Path(archive_path), dest_dir)
            elif kind == ArchiveKind.TAR_GZ:
                self._extract_tar_gz(Path(archive_path), dest_dir)
            else:
                raise SourceError(f"Unsupported archive format: {kind}")
        except (zipfile.BadZipFile, tarfile.TarError, EOFError, OSError) as e:
            raise SourceError(f"Failed to extract archive {archive_path}\nError: {e}") from e

    @staticmethod
    def _check_member(name: str, dest_dir: Path) -> None:
        target = (dest_dir / name).resolve()
        if target != dest_dir and dest_dir not in target.parents:
            raise SourceError(f"Archive member escapes the extraction directory: {name}")

    def _extract_zip(self, archive_path: Path, dest_dir: Path) -> None:
        with zipfile.ZipFile(archive_path) as archive:
            for name in archive.namelist():
                self._check_member(name, dest_dir)
            archive.extractall(dest_dir)

    def _extract_tar_gz(self, archive_path: Path, dest_dir: Path) -> None:
        with tarfile.open(archive_path, mode="r:gz") as archive:
            members = archive.getmembers()
            for member in members:
                if member.issym() or member.islnk():
                    raise SourceError(f"Archive member is a link: {member.name}")
                self._check_member(member.name, dest_dir)
            archive.extractall(dest_dir, members=members)


__all__ = [
    "ArchiveKind",
    "RepositoryCloner",
    "ArchiveDownloader",
    "ArchiveExtractor",
    "GitCloner",
    "HttpDownloader",
    "DefaultArchiveExtractor",
]
