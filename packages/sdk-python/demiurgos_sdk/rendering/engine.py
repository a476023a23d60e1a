"""
Demiurgos Template Engine
=========================

Default template renderer used by ``generate``. Turns one template's text plus
a context into a file under a configured output root.

A template is rendered with Jinja2 in full, then split into YAML front matter
and body. The front matter says where the body goes:

    ---
    to: src/{{ name | snake_case }}.py
    skip_exists: true
    message: "Module created"
    ---
    class {{ name | pascal_case }}:
        ...

Front matter keys:
- ``to`` (required): output path relative to the output root
- ``skip_exists``: leave an existing target untouched
- ``message``: reported back once the file is written

The package's ``templates/`` directory is on the loader search path, so
partials (``_macros.tpl``) can be included or imported by name.
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union

import yaml
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    Undefined,
)

from demiurgos_common import RenderError, get_logger

logger = get_logger(__name__)

FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)(.*)\Z", re.DOTALL)


# ============================================================================
# Renderer contract
# ============================================================================


@dataclass(frozen=True)
class RenderedTemplate:
    """Result of rendering one template."""

    path: Optional[Path]
    skipped: bool = False
    message: Optional[str] = None


class TemplateRenderer(Protocol):
    """Anything that can render one template text against a context."""

    def render(self, template_text: str, context: Dict[str, Any]) -> Any: ...


# ============================================================================
# Custom Jinja2 Filters
# ============================================================================


def to_json_filter(value: Any, indent: Optional[int] = None) -> str:
    """Convert value to JSON string."""
    return json.dumps(value, indent=indent, default=str)


def snake_case_filter(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


def kebab_case_filter(value: str) -> str:
    """Convert string to kebab-case."""
    return snake_case_filter(value).replace("_", "-")


def pascal_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", snake_case_filter(value))
    return "".join(word.capitalize() for word in parts if word)


def camel_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = pascal_case_filter(value)
    return pascal[:1].lower() + pascal[1:]


# ============================================================================
# Front matter
# ============================================================================


def split_front_matter(rendered: str) -> tuple:
    """
    Split rendered text into (front_matter_dict, body).

    Raises:
        RenderError: If the front matter is missing or is not a YAML mapping
    """
    match = FRONT_MATTER_PATTERN.match(rendered)
    if not match:
        raise RenderError("Template has no front matter (expected a leading '---' block)")
    try:
        front_matter = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise RenderError(f"Invalid YAML in template front matter: {e}") from e
    if not isinstance(front_matter, dict):
        raise RenderError("Template front matter must be a mapping")
    return front_matter, match.group(2)


# ============================================================================
# Front matter renderer
# ============================================================================


class FrontmatterRenderer:
    """
    Jinja2 renderer that writes each template to the path named in its front matter.

    Example:
        >>> renderer = FrontmatterRenderer(Path("out"), [package.templates_root])
        >>> renderer.render(template_text, {"name": "billing"})
        RenderedTemplate(path=PosixPath('out/src/billing.py'), skipped=False, message=None)
    """

    def __init__(
        self,
        output_root: Union[str, Path],
        template_dirs: Optional[List[Union[str, Path]]] = None,
        strict_mode: bool = True,
    ):
        """
        Initialize the renderer.

        Args:
            output_root: Directory ``to`` paths are relative to
            template_dirs: Directories partials are included from
            strict_mode: If True, raise errors for undefined variables
        """
        self.output_root = Path(output_root)
        search_paths = [str(Path(d)) for d in (template_dirs or []) if Path(d).is_dir()]
        logger.debug("Template search paths", paths=search_paths)

        self.env = Environment(
            loader=FileSystemLoader(search_paths),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined if strict_mode else Undefined,
        )

        self.env.filters["tojson"] = to_json_filter
        self.env.filters["snake_case"] = snake_case_filter
        self.env.filters["kebab_case"] = kebab_case_filter
        self.env.filters["pascal_case"] = pascal_case_filter
        self.env.filters["camel_case"] = camel_case_filter

        self.template_paths = search_paths

    def render_text(self, template_text: str, context: Dict[str, Any]) -> str:
        """
        Render template text without writing anything.

        Raises:
            RenderError: If the template fails to compile or render
        """
        try:
            return self.env.from_string(template_text).render(context)
        except TemplateError as e:
            raise RenderError(f"Template rendering error: {e}") from e

    def _target_path(self, to: Any) -> Path:
        if not isinstance(to, str) or not to.strip():
            raise RenderError("Template front matter needs a non-empty 'to' path")
        relative = Path(to.strip())
        if relative.is_absolute():
            raise RenderError(f"Template 'to' path must be relative: {to}")
        root = self.output_root.resolve()
        target = (root / relative).resolve()
        if root not in target.parents:
            raise RenderError(f"Template 'to' path escapes the output directory: {to}")
        return target

    def render(self, template_text: str, context: Dict[str, Any]) -> RenderedTemplate:
        """
        Render a template and write its body to the front matter ``to`` path.

        Raises:
            RenderError: On template errors, bad front matter or write failures
        """
        rendered = self.render_text(template_text, context)
        front_matter, body = split_front_matter(rendered)
        target = self._target_path(front_matter.get("to"))
        message = front_matter.get("message")

        if front_matter.get("skip_exists") and target.exists():
            logger.info("Skipping existing file", path=str(target))
            return RenderedTemplate(path=target, skipped=True, message=None)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(body, encoding="utf-8")
        except OSError as e:
            raise RenderError(f"Failed to write {target}: {e}") from e

        logger.debug("Wrote rendered template", path=str(target))
        if message:
            logger.info(str(message), path=str(target))
        return RenderedTemplate(path=target, skipped=False, message=message)


__all__ = [
    "FrontmatterRenderer",
    "RenderedTemplate",
    "TemplateRenderer",
    "split_front_matter",
    "to_json_filter",
    "snake_case_filter",
    "kebab_case_filter",
    "pascal_case_filter",
    "camel_case_filter",
]
