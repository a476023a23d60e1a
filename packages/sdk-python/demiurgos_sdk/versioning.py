"""
Semantic Version Parsing and Comparison
=======================================

Generator versions are semantic versions (https://semver.org). The installed
store uses this ordering to list versions and to pick the latest one.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from demiurgos_common import SEMVER_PATTERN


@dataclass(frozen=True)
class SemVer:
    """
    A parsed semantic version.

    Precedence follows semver: build metadata is ignored, and a pre-release
    sorts before the matching release (1.0.0-rc.1 < 1.0.0). Pre-release
    identifiers compare numerically when numeric, lexically otherwise, and
    numeric identifiers sort before alphanumeric ones.
    """

    major: int
    minor: int = 0
    patch: int = 0
    pre_release: Optional[str] = None
    build: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            base += f"-{self.pre_release}"
        if self.build:
            base += f"+{self.build}"
        return base

    def _pre_release_key(self) -> Tuple:
        if self.pre_release is None:
            # Releases sort after every pre-release of the same core version
            return (1,)
        parts = []
        for identifier in self.pre_release.split("."):
            if identifier.isdigit():
                parts.append((0, int(identifier), ""))
            else:
                parts.append((1, 0, identifier))
        return (0, tuple(parts))

    def as_tuple(self) -> Tuple:
        return (self.major, self.minor, self.patch, self._pre_release_key())

    def __lt__(self, other: "SemVer") -> bool:
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: "SemVer") -> bool:
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: "SemVer") -> bool:
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: "SemVer") -> bool:
        return self.as_tuple() >= other.as_tuple()


def parse_semver(version_str: str) -> SemVer:
    """
    Parse a semantic version string.

    Raises:
        ValueError: If the string is not a semantic version

    Examples:
        >>> parse_semver("1.2.3-rc.1+build.5")
        SemVer(major=1, minor=2, patch=3, pre_release='rc.1', build='build.5')
    """
    match = re.match(SEMVER_PATTERN, version_str.strip())
    if not match:
        raise ValueError(f"Invalid semantic version: '{version_str}'")
    return SemVer(
        major=int(match.group(1)),
        minor=int(match.group(2)),
        patch=int(match.group(3)),
        pre_release=match.group(4),
        build=match.group(5),
    )


def version_sort_key(version_str: str) -> Tuple:
    """
    Sort key usable on arbitrary directory names.

    Valid semantic versions sort by precedence; anything else sorts first,
    lexically, so a stray directory never breaks a listing.
    """
    try:
        return (1, parse_semver(version_str).as_tuple(), version_str)
    except ValueError:
        return (0, (), version_str)


__all__ = ["SemVer", "parse_semver", "version_sort_key"]
