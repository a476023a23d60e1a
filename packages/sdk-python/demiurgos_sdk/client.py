"""
High-level flows used by the CLI: install a generator from any source and
generate a project from a loaded generator.
"""

import copy
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from demiurgos_common import OUTPUT_FOLDER_KEY, get_logger

from .package import GeneratorPackage, load_package
from .rendering import FrontmatterRenderer, RenderReport, TemplateRenderer, render_package
from .sources import SourceLocator
from .store import GeneratorStore, InstallResult

logger = get_logger(__name__)

RendererFactory = Callable[[GeneratorPackage, Path], TemplateRenderer]


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a new dict with ``override`` merged over ``base``; nested dicts merge recursively.

    Examples:
        >>> deep_merge({"db": {"port": 5432, "host": "x"}}, {"db": {"host": "y"}})
        {'db': {'port': 5432, 'host': 'y'}}
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def build_context(package: GeneratorPackage, config_context: Dict[str, Any]) -> Dict[str, Any]:
    """Package defaults from ``values.yaml`` with the resolved config on top.

    ``outputFolder`` is always taken from the config context.
    """
    context = deep_merge(package.values, config_context)
    if OUTPUT_FOLDER_KEY in config_context:
        context[OUTPUT_FOLDER_KEY] = config_context[OUTPUT_FOLDER_KEY]
    return context


def default_renderer_factory(package: GeneratorPackage, destination: Path) -> TemplateRenderer:
    """Front matter renderer writing under ``destination`` with the package's partials available."""
    return FrontmatterRenderer(destination, [package.templates_root])


def generate(
    package: GeneratorPackage,
    destination: Union[str, Path],
    config_context: Dict[str, Any],
    renderer_factory: Optional[RendererFactory] = None,
) -> RenderReport:
    """
    Render a generator and its nested dependencies into ``destination``.

    The parent renders first, then each dependency depth-first. Every package
    gets its own context (its values under the shared config).

    Raises:
        RenderError: On the first package that fails to render
    """
    destination = Path(destination)
    factory = renderer_factory or default_renderer_factory
    report = RenderReport()

    for current in package.iter_packages():
        logger.info("Generating", generator=current.name, version=current.version, destination=str(destination))
        context = build_context(current, config_context)
        renderer = factory(current, destination)
        report.extend(render_package(current, destination, context, renderer))

    return report


def install_generator(
    source: str,
    store: GeneratorStore,
    locator: Optional[SourceLocator] = None,
    force: bool = False,
) -> InstallResult:
    """
    Stage ``source``, validate it loads as a generator, and copy it into ``store``.

    The staging area is removed whatever the outcome.

    Raises:
        SourceError: If the source cannot be staged
        LoadError: If the staged directory is not a valid generator
        InstallError: If copying into the store fails
    """
    locator = locator or SourceLocator()
    with locator.stage(source) as staged:
        package = load_package(staged.root)
        logger.info("Installing generator", name=package.name, version=package.version, source=source)
        result = store.install(staged.root, force=force)

    if result.created:
        logger.info("Installed generator", name=result.name, version=result.version, path=str(result.path))
    return result


__all__ = [
    "RendererFactory",
    "deep_merge",
    "build_context",
    "default_renderer_factory",
    "generate",
    "install_generator",
]
