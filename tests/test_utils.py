"""Unit tests for the Rich output helpers (vibekit.utils) and TemplateRenderer."""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from vibekit.templates import DEFAULT_CONTEXT_TEMPLATE, TemplateRenderer
from vibekit.utils import (
    print_error,
    print_header,
    print_notice,
    print_section,
    print_success,
    print_summary_table,
)


def _output(console: Console) -> str:
    return console.file.getvalue()


class TestOutputHelpers:
    @pytest.mark.unit
    def test_print_header_with_subtitle(self, quiet_console: Console):
        print_header("Vibe Project Generator", "Answer these questions", quiet_console)
        output = _output(quiet_console)
        assert "Vibe Project Generator" in output
        assert "Answer these questions" in output

    @pytest.mark.unit
    def test_print_section(self, quiet_console: Console):
        print_section("Target Audience", quiet_console)
        assert "Target Audience" in _output(quiet_console)

    @pytest.mark.unit
    def test_message_helpers(self, quiet_console: Console):
        print_success("done", quiet_console)
        print_error("broken", quiet_console)
        print_notice("fyi", quiet_console)
        output = _output(quiet_console)
        for word in ("done", "broken", "fyi"):
            assert word in output

    @pytest.mark.unit
    def test_summary_table(self, quiet_console: Console):
        print_summary_table({"Name": "Foo", "Features": "3"}, title="Generated", out=quiet_console)
        output = _output(quiet_console)
        assert "Generated" in output
        assert "Foo" in output
        assert "Features" in output


class TestTemplateRenderer:
    @pytest.mark.unit
    def test_render_string(self):
        renderer = TemplateRenderer()
        assert renderer.render_string("Build a {{ type }}", {"type": "game"}) == "Build a game"

    @pytest.mark.unit
    def test_render_string_conditionals(self):
        renderer = TemplateRenderer()
        template = "{% if a %}A and {% endif %}rest"
        assert renderer.render_string(template, {"a": True}) == "A and rest"
        assert renderer.render_string(template, {"a": False}) == "rest"

    @pytest.mark.unit
    def test_bundled_context_template_exists(self):
        path = TemplateRenderer().template_path()
        assert path.name == DEFAULT_CONTEXT_TEMPLATE
        text = path.read_text(encoding="utf-8")
        for token in ("[PROJECT_NAME]", "[PROJECT_TYPE]", "[DOMAIN]", "[STATUS]"):
            assert token in text

    @pytest.mark.unit
    def test_missing_bundled_template(self, tmp_path: Path):
        renderer = TemplateRenderer(template_dir=tmp_path)
        with pytest.raises(FileNotFoundError):
            renderer.template_path("nope.md")

    @pytest.mark.unit
    def test_render_string_does_not_escape_html(self):
        renderer = TemplateRenderer()
        context = {"users": "Kids' club & <friends>"}
        assert renderer.render_string("For {{ users }}", context) == "For Kids' club & <friends>"
