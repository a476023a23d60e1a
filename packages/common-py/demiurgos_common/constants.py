"""
demiurgos Shared Constants

This module defines constants used across multiple demiurgos packages.
It serves as the single source of truth for file names, supported values and defaults.

Usage:
    from demiurgos_common.constants import MANIFEST_FILE, PARTIAL_TEMPLATE_SUFFIX

    manifest_path = base_path / MANIFEST_FILE
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

DEMIURGOS_VERSION = "0.1.0"
"""Current demiurgos release"""

APP_NAME = "demiurgos"
"""Application name, used for the local data directory"""

SUPPORTED_API_VERSIONS = ["v1"]
"""Generator manifest apiVersion values this release understands"""

DEFAULT_API_VERSION = "v1"
"""apiVersion written into newly scaffolded generators"""


# =============================================================================
# GENERATOR PACKAGE LAYOUT
# =============================================================================

MANIFEST_FILE = "Generator.yaml"
"""Mandatory manifest at the root of every generator"""

VALUES_FILE = "values.yaml"
"""Default configuration values (optional, defaults to an empty mapping)"""

SCHEMA_FILE = "schema.json"
"""Optional JSON schema describing the accepted configuration"""

LICENSE_FILE = "LICENSE"
README_FILE = "README.md"

FILES_DIR = "files"
"""Static files copied verbatim (recursive)"""

TEMPLATES_DIR = "templates"
"""Templates rendered on generate (direct children only)"""

DEPENDENCIES_DIR = "dependencies"
"""Nested generator packages, one per subdirectory"""

GENERATORS_DIR = "generators"
"""Name of the installed store directory under the data dir"""

PARTIAL_TEMPLATE_PREFIX = "_"
PARTIAL_TEMPLATE_SUFFIX = ".tpl"
"""Templates named _*.tpl are includes and are never emitted directly"""

IGNORED_INSTALL_NAMES = [".git"]
"""Entries never copied into the installed store"""


# =============================================================================
# SOURCES
# =============================================================================

VCS_HOST_PREFIXES = [
    "https://github.com",
    "https://gitlab.com",
    "https://bitbucket.org",
]
"""URL prefixes recognised as hosted version-control repositories"""

ZIP_SUFFIXES = [".zip"]
TAR_GZ_SUFFIXES = [".tar.gz", ".tgz"]
ARCHIVE_SUFFIXES = ZIP_SUFFIXES + TAR_GZ_SUFFIXES
"""Filename suffixes recognised as downloadable archives"""

DOWNLOAD_FILE_STEM = "download"
"""Name of the archive written into the staging directory before extraction"""


# =============================================================================
# CONFIG DOCUMENTS
# =============================================================================

ENTITIES_KEY = "entities"
"""Top-level config key whose values may be $ref objects"""

REF_KEY = "$ref"
"""Key of a single-key reference object"""

OUTPUT_FOLDER_KEY = "outputFolder"
"""Context key injected with the absolute destination path"""


# =============================================================================
# DEFAULT VALUES
# =============================================================================

DEFAULT_LOG_LEVEL = "info"
"""Default logging level"""

LOG_LEVELS = ["debug", "info", "warn", "warning", "error"]
"""Valid log levels"""

DEFAULT_HTTP_TIMEOUT = 30
"""Default timeout (seconds) for archive downloads"""

DEFAULT_GIT_EXECUTABLE = "git"
"""Executable used to clone repositories"""

NEW_GENERATOR_VERSION = "0.0.1"
"""Version written into newly scaffolded generators"""


# =============================================================================
# VALIDATION PATTERNS
# =============================================================================

GENERATOR_NAME_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9._-]*$"
"""Generator names become store path segments: no separators, no leading dot"""

SEMVER_PATTERN = (
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)
"""Semantic version (MAJOR.MINOR.PATCH[-prerelease][+build])"""
