"""
Generator scaffolding for ``demiurgos new``.

Creates a blank but working generator package:

    <name>/
        Generator.yaml
        values.yaml
        README.md
        schema.json
        files/.gitkeep
        templates/_macros.tpl
        templates/example.tpl
        dependencies/

The manifest is built from the schema model so a freshly scaffolded
generator always passes ``load_package``.
"""

import json
from pathlib import Path
from typing import Dict, Union

import yaml

from demiurgos_common import (
    DEFAULT_API_VERSION,
    DEPENDENCIES_DIR,
    FILES_DIR,
    MANIFEST_FILE,
    README_FILE,
    SCHEMA_FILE,
    TEMPLATES_DIR,
    VALUES_FILE,
    ValidationError,
    get_logger,
)
from demiurgos_common.constants import NEW_GENERATOR_VERSION
from demiurgos_schema import GeneratorManifest, to_yaml_string, validate_generator_name

logger = get_logger(__name__)

MACROS_TEMPLATE = """\
{% macro greeting(name) -%}
Hello from {{ name }}!
{%- endmacro %}
"""

EXAMPLE_TEMPLATE = """\
---
to: {{ name | snake_case }}/README.txt
skip_exists: true
message: "Created {{ name | snake_case }}/README.txt"
---
{% import "_macros.tpl" as macros %}
{{ macros.greeting(name) }}
"""


def generate_manifest_template(name: str) -> str:
    """Build the starter ``Generator.yaml`` from the schema model."""
    manifest = GeneratorManifest(
        api_version=DEFAULT_API_VERSION,
        name=name,
        version=NEW_GENERATOR_VERSION,
        description=f"demiurgos generator: {name}",
        keywords=[],
    )
    return to_yaml_string(manifest)


def _schema_skeleton() -> Dict:
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "title": "Generator config",
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "entities": {"type": "object"},
        },
    }


def _readme(name: str) -> str:
    return (
        f"# {name}\n\n"
        "A demiurgos generator.\n\n"
        "- `files/` is copied verbatim into the output folder\n"
        "- `templates/` holds front matter templates; `_*.tpl` files are partials\n"
        "- `values.yaml` holds default template values\n\n"
        "Try it:\n\n"
        f"    demiurgos generate --generator-path {name} --config config.json --output out\n"
    )


def scaffold_generator(name: str, parent_dir: Union[str, Path] = ".", force: bool = False) -> Path:
    """
    Create a new generator package directory.

    Args:
        name: Generator name (also the directory name)
        parent_dir: Directory to create it in
        force: Write into an existing directory, overwriting scaffold files

    Returns:
        Path of the created generator

    Raises:
        ValidationError: If the name is invalid or the directory exists without ``force``
    """
    validate_generator_name(name)
    root = Path(parent_dir) / name
    if root.exists() and not force:
        raise ValidationError(f"Directory already exists: {root} (use --force to overwrite)")
    if root.exists() and not root.is_dir():
        raise ValidationError(f"Not a directory: {root}")

    (root / FILES_DIR).mkdir(parents=True, exist_ok=True)
    (root / TEMPLATES_DIR).mkdir(exist_ok=True)
    (root / DEPENDENCIES_DIR).mkdir(exist_ok=True)

    (root / MANIFEST_FILE).write_text(generate_manifest_template(name), encoding="utf-8")
    (root / VALUES_FILE).write_text(
        yaml.safe_dump({"name": name}, default_flow_style=False, sort_keys=False),
        encoding="utf-8",
    )
    (root / README_FILE).write_text(_readme(name), encoding="utf-8")
    (root / SCHEMA_FILE).write_text(json.dumps(_schema_skeleton(), indent=2) + "\n", encoding="utf-8")
    (root / FILES_DIR / ".gitkeep").write_text("", encoding="utf-8")
    (root / TEMPLATES_DIR / "_macros.tpl").write_text(MACROS_TEMPLATE, encoding="utf-8")
    (root / TEMPLATES_DIR / "example.tpl").write_text(EXAMPLE_TEMPLATE, encoding="utf-8")

    logger.info("Scaffolded generator", name=name, path=str(root))
    return root


__all__ = ["generate_manifest_template", "scaffold_generator"]
