"""Tests for the Jinja2 front matter renderer."""

import pytest

from demiurgos_common import RenderError
from demiurgos_sdk import FrontmatterRenderer
from demiurgos_sdk.rendering import (
    camel_case_filter,
    kebab_case_filter,
    pascal_case_filter,
    snake_case_filter,
    split_front_matter,
)


class TestFilters:
    @pytest.mark.parametrize(
        "value,snake,kebab,pascal,camel",
        [
            ("UserProfile", "user_profile", "user-profile", "UserProfile", "userProfile"),
            ("user-profile", "user_profile", "user-profile", "UserProfile", "userProfile"),
            ("user profile", "user_profile", "user-profile", "UserProfile", "userProfile"),
            ("billing", "billing", "billing", "Billing", "billing"),
        ],
    )
    def test_case_filters(self, value, snake, kebab, pascal, camel):
        assert snake_case_filter(value) == snake
        assert kebab_case_filter(value) == kebab
        assert pascal_case_filter(value) == pascal
        assert camel_case_filter(value) == camel


class TestSplitFrontMatter:
    def test_splits(self):
        front_matter, body = split_front_matter("---\nto: a.txt\n---\nbody\n")
        assert front_matter == {"to": "a.txt"}
        assert body == "body\n"

    def test_missing_front_matter(self):
        with pytest.raises(RenderError, match="no front matter"):
            split_front_matter("just a body")

    def test_front_matter_must_be_mapping(self):
        with pytest.raises(RenderError, match="must be a mapping"):
            split_front_matter("---\n- a\n---\nbody")


class TestFrontmatterRenderer:
    def test_writes_to_target(self, tmp_path):
        renderer = FrontmatterRenderer(tmp_path)
        template = "---\nto: src/{{ name | snake_case }}.py\n---\nclass {{ name | pascal_case }}:\n    pass\n"

        result = renderer.render(template, {"name": "UserProfile"})

        target = tmp_path / "src" / "user_profile.py"
        assert result.path == target.resolve()
        assert result.skipped is False
        assert target.read_text() == "class UserProfile:\n    pass\n"

    def test_message_is_returned(self, tmp_path):
        renderer = FrontmatterRenderer(tmp_path)
        result = renderer.render('---\nto: a.txt\nmessage: "Created {{ name }}"\n---\nA', {"name": "a"})
        assert result.message == "Created a"

    def test_skip_exists(self, tmp_path):
        (tmp_path / "a.txt").write_text("keep me")
        renderer = FrontmatterRenderer(tmp_path)

        result = renderer.render("---\nto: a.txt\nskip_exists: true\n---\nnew", {})

        assert result.skipped is True
        assert (tmp_path / "a.txt").read_text() == "keep me"

    def test_overwrites_without_skip_exists(self, tmp_path):
        (tmp_path / "a.txt").write_text("old")
        FrontmatterRenderer(tmp_path).render("---\nto: a.txt\n---\nnew", {})
        assert (tmp_path / "a.txt").read_text() == "new"

    def test_includes_partials_from_template_dirs(self, tmp_path):
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "_macros.tpl").write_text(
            "{% macro greet(who) -%}\nHello {{ who }}!\n{%- endmacro %}\n"
        )
        renderer = FrontmatterRenderer(tmp_path / "out", [templates])
        template = '---\nto: greeting.txt\n---\n{% import "_macros.tpl" as m %}\n{{ m.greet(name) }}\n'

        renderer.render(template, {"name": "World"})

        assert (tmp_path / "out" / "greeting.txt").read_text() == "Hello World!\n"

    def test_tojson_filter(self, tmp_path):
        FrontmatterRenderer(tmp_path).render("---\nto: a.json\n---\n{{ data | tojson }}", {"data": {"a": [1, 2]}})
        assert (tmp_path / "a.json").read_text() == '{"a": [1, 2]}'

    def test_undefined_variable_is_an_error(self, tmp_path):
        with pytest.raises(RenderError, match="Template rendering error"):
            FrontmatterRenderer(tmp_path).render("---\nto: a.txt\n---\n{{ missing }}", {})

    def test_lenient_mode(self, tmp_path):
        FrontmatterRenderer(tmp_path, strict_mode=False).render("---\nto: a.txt\n---\n[{{ missing }}]", {})
        assert (tmp_path / "a.txt").read_text() == "[]"

    @pytest.mark.parametrize("to", ["/etc/passwd", "../escape.txt", "a/../../escape.txt"])
    def test_target_must_stay_inside_output_root(self, tmp_path, to):
        renderer = FrontmatterRenderer(tmp_path / "out")
        with pytest.raises(RenderError, match="'to' path"):
            renderer.render(f"---\nto: {to}\n---\nx", {})

    def test_missing_to(self, tmp_path):
        with pytest.raises(RenderError, match="non-empty 'to'"):
            FrontmatterRenderer(tmp_path).render("---\nmessage: hi\n---\nx", {})

    def test_context_keys_are_not_keyword_arguments(self, tmp_path):
        context = {"name": "billing", "self": 1}

        FrontmatterRenderer(tmp_path).render("---\nto: a.txt\n---\n{{ name }}", context)

        assert (tmp_path / "a.txt").read_text() == "billing"
