"""Tests for generator scaffolding."""

import json

import pytest
import yaml

from demiurgos_common import ValidationError
from demiurgos_sdk import FrontmatterRenderer, load_package, render_package, scaffold_generator


class TestScaffoldGenerator:
    def test_creates_layout(self, tmp_path):
        root = scaffold_generator("rest-api", tmp_path)

        assert root == tmp_path / "rest-api"
        for relative in [
            "Generator.yaml",
            "values.yaml",
            "README.md",
            "schema.json",
            "files/.gitkeep",
            "templates/_macros.tpl",
            "templates/example.tpl",
        ]:
            assert (root / relative).is_file(), relative
        assert (root / "dependencies").is_dir()

    def test_manifest_is_valid(self, tmp_path):
        root = scaffold_generator("rest-api", tmp_path)

        manifest = yaml.safe_load((root / "Generator.yaml").read_text())
        assert manifest["apiVersion"] == "v1"
        assert manifest["name"] == "rest-api"
        assert manifest["version"] == "0.0.1"
        assert json.loads((root / "schema.json").read_text())["type"] == "object"

    def test_scaffold_loads_and_renders(self, tmp_path):
        root = scaffold_generator("rest-api", tmp_path)
        package = load_package(root)
        destination = tmp_path / "out"

        assert package.key == ("rest-api", "0.0.1")
        assert package.dependencies == ()
        report = render_package(
            package,
            destination,
            dict(package.values),
            FrontmatterRenderer(destination, [package.templates_root]),
        )

        assert [p.name for p in report.skipped_partials] == ["_macros.tpl"]
        assert (destination / "rest_api" / "README.txt").read_text() == "Hello from rest-api!\n"

    def test_existing_directory_is_refused(self, tmp_path):
        (tmp_path / "rest-api").mkdir()
        with pytest.raises(ValidationError, match="already exists"):
            scaffold_generator("rest-api", tmp_path)

    def test_force_writes_into_existing_directory(self, tmp_path):
        (tmp_path / "rest-api").mkdir()
        (tmp_path / "rest-api" / "notes.txt").write_text("mine")

        root = scaffold_generator("rest-api", tmp_path, force=True)

        assert (root / "Generator.yaml").is_file()
        assert (root / "notes.txt").read_text() == "mine"

    @pytest.mark.parametrize("name", ["../escape", "bad/name", ""])
    def test_invalid_name(self, tmp_path, name):
        with pytest.raises(ValidationError):
            scaffold_generator(name, tmp_path)
