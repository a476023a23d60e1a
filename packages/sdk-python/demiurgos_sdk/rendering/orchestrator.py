"""
Render Orchestrator
===================

Drives a template renderer over one generator package:

1. No templates: nothing to do.
2. Make sure the destination is a directory.
3. Copy every static file, keeping its path relative to ``files/``.
4. Hand each template (sorted by path) to the renderer with the context,
   skipping partials (``_*.tpl``), which only exist to be included.

The orchestrator decides what is rendered and in which order; template
syntax is entirely the renderer's business. Any failure aborts the render.
"""

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from demiurgos_common import (
    PARTIAL_TEMPLATE_PREFIX,
    PARTIAL_TEMPLATE_SUFFIX,
    RenderError,
    get_logger,
)

from ..package import GeneratorPackage
from .engine import TemplateRenderer

logger = get_logger(__name__)


@dataclass
class RenderReport:
    """What a render did, in order."""

    copied_files: List[Path] = field(default_factory=list)
    rendered_templates: List[Path] = field(default_factory=list)
    skipped_partials: List[Path] = field(default_factory=list)
    outputs: List[Tuple[Path, Any]] = field(default_factory=list)

    def extend(self, other: "RenderReport") -> None:
        self.copied_files.extend(other.copied_files)
        self.rendered_templates.extend(other.rendered_templates)
        self.skipped_partials.extend(other.skipped_partials)
        self.outputs.extend(other.outputs)


def is_partial_template(path: Path) -> bool:
    """True for ``_name.tpl`` files, which are includes and never emitted."""
    return path.name.startswith(PARTIAL_TEMPLATE_PREFIX) and path.suffix == PARTIAL_TEMPLATE_SUFFIX


def ensure_destination(destination: Path) -> Path:
    """
    Create ``destination`` if needed and check it is a directory.

    Raises:
        RenderError: If a non-directory already exists there or it cannot be created
    """
    if destination.exists() and not destination.is_dir():
        raise RenderError(f"Destination is not a directory: {destination}")
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RenderError(f"Cannot create destination directory {destination}: {e}") from e
    return destination


def copy_files(package: GeneratorPackage, destination: Path) -> List[Path]:
    """
    Copy the package's static files into ``destination``.

    Returns:
        Destination paths, in the package's file order

    Raises:
        RenderError: On the first file that cannot be copied
    """
    if package.files is None:
        logger.debug("There are no files to copy", generator=package.name)
        return []

    files_root = package.files_root
    copied = []
    for source in package.files:
        target = destination / source.relative_to(files_root)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)
        except OSError as e:
            raise RenderError(f"Failed to copy {source} to {target}: {e}") from e
        copied.append(target)
    logger.debug("Copied files", generator=package.name, count=len(copied))
    return copied


def render_package(
    package: GeneratorPackage,
    destination: Union[str, Path],
    context: Dict[str, Any],
    renderer: TemplateRenderer,
) -> RenderReport:
    """
    Copy files and render templates of one package (dependencies excluded).

    Args:
        package: Loaded generator
        destination: Output directory (created if missing)
        context: Template context, passed unchanged to every render call
        renderer: Template renderer collaborator

    Returns:
        RenderReport describing copied files, rendered and skipped templates

    Raises:
        RenderError: On destination conflicts, copy failures or renderer failures
    """
    report = RenderReport()
    if not package.templates:
        logger.debug("There are no templates to generate", generator=package.name)
        return report

    destination = ensure_destination(Path(destination))
    report.copied_files.extend(copy_files(package, destination))

    for template in sorted(package.templates):
        if is_partial_template(template):
            logger.debug("Skipping partial template", template=template.name)
            report.skipped_partials.append(template)
            continue

        try:
            template_text = template.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RenderError(f"Failed to read template {template}: {e}") from e

        logger.debug("Rendering template", generator=package.name, template=template.name)
        try:
            output = renderer.render(template_text, context)
        except RenderError as e:
            raise RenderError(f"Failed to render template {template}: {e.message}") from e
        except Exception as e:
            raise RenderError(f"Failed to render template {template}: {e}") from e

        report.rendered_templates.append(template)
        report.outputs.append((template, output))

    logger.info(
        "Rendered generator",
        generator=package.name,
        version=package.version,
        files=len(report.copied_files),
        templates=len(report.rendered_templates),
    )
    return report


__all__ = [
    "RenderReport",
    "is_partial_template",
    "ensure_destination",
    "copy_files",
    "render_package",
]
