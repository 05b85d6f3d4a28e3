"""Jinja2 rendering for questionnaire defaults and generated sentences.

Provides the TemplateRenderer class, which renders the small inline templates
carried by question sets and synthesis profiles (for example
``"Build a {{ type }} focused on {{ priorities }}"``) and locates the bundled
files under ``vibekit/templates/``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

DEFAULT_CONTEXT_TEMPLATE = "ai-context.md"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for vibekit.

    Inline templates are the common case: every default answer and every
    generated AI prompt sentence is a one-line template rendered against the
    answers collected so far.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    def template_path(self, name: str = DEFAULT_CONTEXT_TEMPLATE) -> Path:
        """Return the on-disk path of a bundled template file.

        Raises:
            FileNotFoundError: If no such template ships with the package.
        """
        path = self.template_dir / name
        if not path.is_file():
            raise FileNotFoundError(f"Bundled template not found: {path}")
        return path
