"""
Rendering Module
================

- engine: default Jinja2 front matter renderer
- orchestrator: copies static files and dispatches templates to a renderer
"""

from .engine import (
    FrontmatterRenderer,
    RenderedTemplate,
    TemplateRenderer,
    camel_case_filter,
    kebab_case_filter,
    pascal_case_filter,
    snake_case_filter,
    split_front_matter,
    to_json_filter,
)
from .orchestrator import (
    RenderReport,
    copy_files,
    ensure_destination,
    is_partial_template,
    render_package,
)

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
    "RenderReport",
    "copy_files",
    "ensure_destination",
    "is_partial_template",
    "render_package",
]
