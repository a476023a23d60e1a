"""
demiurgos Common Package

Shared utilities and primitives used across all demiurgos packages.

This package provides:
- Exception classes for consistent error handling
- Constants for file names, supported values and defaults
- Structured logging
- Environment-driven settings

Usage:
    from demiurgos_common import LoadError, get_logger, get_settings
    from demiurgos_common import MANIFEST_FILE

    settings = get_settings()
    store_root = settings.generators_dir
"""

# Error classes
from .errors import (
    DemiurgosError,
    ValidationError,
    SourceError,
    LoadError,
    InstallError,
    ResolveError,
    RenderError,
    NotFoundError,
)

# Constants
from .constants import (
    DEMIURGOS_VERSION,
    APP_NAME,
    SUPPORTED_API_VERSIONS,
    DEFAULT_API_VERSION,
    MANIFEST_FILE,
    VALUES_FILE,
    SCHEMA_FILE,
    LICENSE_FILE,
    README_FILE,
    FILES_DIR,
    TEMPLATES_DIR,
    DEPENDENCIES_DIR,
    GENERATORS_DIR,
    PARTIAL_TEMPLATE_PREFIX,
    PARTIAL_TEMPLATE_SUFFIX,
    VCS_HOST_PREFIXES,
    ARCHIVE_SUFFIXES,
    ENTITIES_KEY,
    REF_KEY,
    OUTPUT_FOLDER_KEY,
    LOG_LEVELS,
    GENERATOR_NAME_PATTERN,
    SEMVER_PATTERN,
)

# Logger
from .logger import (
    DemiurgosLogger,
    get_logger,
    configure_logging,
)

# Settings
from .settings import (
    DemiurgosSettings,
    default_data_dir,
    get_settings,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "DemiurgosError",
    "ValidationError",
    "SourceError",
    "LoadError",
    "InstallError",
    "ResolveError",
    "RenderError",
    "NotFoundError",
    # Constants
    "DEMIURGOS_VERSION",
    "APP_NAME",
    "SUPPORTED_API_VERSIONS",
    "DEFAULT_API_VERSION",
    "MANIFEST_FILE",
    "VALUES_FILE",
    "SCHEMA_FILE",
    "LICENSE_FILE",
    "README_FILE",
    "FILES_DIR",
    "TEMPLATES_DIR",
    "DEPENDENCIES_DIR",
    "GENERATORS_DIR",
    "PARTIAL_TEMPLATE_PREFIX",
    "PARTIAL_TEMPLATE_SUFFIX",
    "VCS_HOST_PREFIXES",
    "ARCHIVE_SUFFIXES",
    "ENTITIES_KEY",
    "REF_KEY",
    "OUTPUT_FOLDER_KEY",
    "LOG_LEVELS",
    "GENERATOR_NAME_PATTERN",
    "SEMVER_PATTERN",
    # Logger
    "DemiurgosLogger",
    "get_logger",
    "configure_logging",
    # Settings
    "DemiurgosSettings",
    "default_data_dir",
    "get_settings",
]
