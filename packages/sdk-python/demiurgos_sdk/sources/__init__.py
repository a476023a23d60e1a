"""
Generator Sources Module
========================

Classifies and stages generator sources:
- Local directories (used in place)
- Hosted repositories (cloned)
- Remote zip / tar.gz archives (downloaded and extracted)
"""

from .fetchers import (
    ArchiveDownloader,
    ArchiveExtractor,
    ArchiveKind,
    DefaultArchiveExtractor,
    GitCloner,
    HttpDownloader,
    RepositoryCloner,
)
from .locator import (
    SourceKind,
    SourceLocator,
    StagedSource,
    classify_source,
    find_generator_root,
    locate_source,
)

__all__ = [
    "SourceKind",
    "SourceLocator",
    "StagedSource",
    "classify_source",
    "find_generator_root",
    "locate_source",
    "ArchiveKind",
    "RepositoryCloner",
    "ArchiveDownloader",
    "ArchiveExtractor",
    "GitCloner",
    "HttpDownloader",
    "DefaultArchiveExtractor",
]
