"""Context materializer.

Writes ``vibe-project.config.json`` and rewrites the AI context document by
literal, global replacement of its bracketed placeholder tokens.  Output
directories are never created here: a missing directory or a denied write
surfaces as the underlying ``OSError``.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from vibekit.config import Config
from vibekit.errors import TemplateNotFoundError
from vibekit.synthesizer.models import ProjectConfig, ProjectMetadata
from vibekit.templates import TemplateRenderer


# Token -> ProjectMetadata attribute, applied in this order.
PLACEHOLDERS: dict[str, str] = {
    "[PROJECT_NAME]": "name",
    "[PROJECT_TYPE]": "type",
    "[DOMAIN]": "domain",
    "[STATUS]": "status",
}


def substitute_placeholders(document: str, metadata: ProjectMetadata) -> str:
    """Replace every occurrence of each placeholder token with its metadata value."""
    for token, attribute in PLACEHOLDERS.items():
        value = getattr(metadata, attribute)
        document = document.replace(token, str(getattr(value, "value", value)))
    return document


class MaterializeResult(BaseModel):
    """Where a run's outputs ended up."""

    config_path: Path
    context_path: Path
    context_updated: bool = Field(
        default=False, description="False when a lenient run found no template"
    )


class ContextMaterializer:
    """Persists a ``ProjectConfig`` and its AI context document.

    Args:
        config: Supplies the output paths.
        require_template: When ``True`` a missing context document aborts the
            run with ``TemplateNotFoundError`` before anything is written.
            When ``False`` the document step is skipped silently.
    """

    def __init__(self, config: Config, *, require_template: bool = True) -> None:
        self.config = config
        self.require_template = require_template

    async def materialize(self, project: ProjectConfig) -> MaterializeResult:
        """Write the config file, then the substituted context document."""
        template = await self.read_template()

        config_path = await self.write_config(project)

        context_updated = False
        if template is not None:
            document = substitute_placeholders(template, project.metadata)
            await asyncio.to_thread(
                self.config.context_path.write_text, document, encoding="utf-8"
            )
            context_updated = True

        return MaterializeResult(
            config_path=config_path,
            context_path=self.config.context_path,
            context_updated=context_updated,
        )

    async def read_template(self) -> Optional[str]:
        """Return the current context document, or ``None`` if lenient and absent.

        Raises:
            TemplateNotFoundError: If the document is required and missing.
        """
        path = self.config.context_path
        if not path.is_file():
            if self.require_template:
                raise TemplateNotFoundError(path)
            return None
        return await asyncio.to_thread(path.read_text, encoding="utf-8")

    async def write_config(self, project: ProjectConfig) -> Path:
        """Overwrite ``vibe-project.config.json`` with *project*."""
        path = self.config.config_path
        await asyncio.to_thread(path.write_text, project.to_json(), encoding="utf-8")
        return path

    def seed_template(
        self, *, overwrite: bool = False, renderer: TemplateRenderer | None = None
    ) -> Path:
        """Copy the bundled context template into ``.vibe/`` if it is absent.

        Returns:
            The context document path, whether or not it was written.
        """
        target = self.config.context_path
        if target.exists() and not overwrite:
            return target
        source = (renderer or TemplateRenderer()).template_path()
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        return target
