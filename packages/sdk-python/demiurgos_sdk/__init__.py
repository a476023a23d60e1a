"""Demiurgos SDK - install generator packages and render projects from them.

This package provides tools for:
- Staging generator sources (local directory, git repository, zip or tar.gz archive)
- Loading generator packages from disk
- Keeping an installed store of generators by name and version
- Resolving JSON config documents used as template context
- Rendering a package's files and templates into an output folder

Example:
    >>> from demiurgos_sdk import GeneratorStore, install_generator, resolve_config, generate
    >>> store = GeneratorStore(get_settings().generators_dir)
    >>> result = install_generator("https://github.com/acme/rest-api", store)
    >>> resolved = resolve_config("config.json", output_folder="out")
    >>> generate(store.get("rest-api"), "out", resolved.context)

Package Structure:
    demiurgos_sdk/
    ├── sources/    - Source classification and staging (git, http, archives)
    ├── package/    - Generator package model and loader
    ├── config/     - Config loading and $ref resolution
    ├── rendering/  - Render orchestrator and the default Jinja2 renderer
    ├── store.py    - Installed generator store
    ├── client.py   - install / generate flows
    └── scaffold.py - Blank generator scaffolding
"""

from .client import (
    RendererFactory,
    build_context,
    deep_merge,
    default_renderer_factory,
    generate,
    install_generator,
)
from .config import (
    ResolvedConfig,
    dereference_config,
    is_reference,
    load_config,
    read_json,
    resolve_config,
)
from .package import GeneratorPackage, load_package, read_manifest
from .rendering import (
    FrontmatterRenderer,
    RenderedTemplate,
    RenderReport,
    TemplateRenderer,
    is_partial_template,
    render_package,
)
from .scaffold import scaffold_generator
from .sources import (
    ArchiveDownloader,
    ArchiveExtractor,
    ArchiveKind,
    DefaultArchiveExtractor,
    GitCloner,
    HttpDownloader,
    RepositoryCloner,
    SourceKind,
    SourceLocator,
    StagedSource,
    classify_source,
    locate_source,
)
from .store import GeneratorStore, InstalledGenerator, InstallResult
from .versioning import SemVer, parse_semver, version_sort_key

__version__ = "0.1.0"

__all__ = [
    # Sources
    "SourceKind",
    "SourceLocator",
    "StagedSource",
    "classify_source",
    "locate_source",
    "ArchiveKind",
    "RepositoryCloner",
    "ArchiveDownloader",
    "ArchiveExtractor",
    "GitCloner",
    "HttpDownloader",
    "DefaultArchiveExtractor",
    # Package
    "GeneratorPackage",
    "load_package",
    "read_manifest",
    # Store
    "GeneratorStore",
    "InstalledGenerator",
    "InstallResult",
    # Config
    "ResolvedConfig",
    "read_json",
    "load_config",
    "is_reference",
    "dereference_config",
    "resolve_config",
    # Rendering
    "FrontmatterRenderer",
    "RenderedTemplate",
    "RenderReport",
    "TemplateRenderer",
    "is_partial_template",
    "render_package",
    # Flows
    "RendererFactory",
    "deep_merge",
    "build_context",
    "default_renderer_factory",
    "generate",
    "install_generator",
    "scaffold_generator",
    # Versioning
    "SemVer",
    "parse_semver",
    "version_sort_key",
    "__version__",
]
