"""vibekit configuration.

Typed settings for a questionnaire run. Every output location is derived from
an explicit ``base_dir`` so that callers (and tests) decide where files land
instead of the process working directory being read implicitly.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global vibekit configuration.

    Instances are created once by the CLI entry point (or by tests) and passed
    to ``SetupPipeline`` and ``ContextMaterializer``.
    """

    base_dir: Path = Field(default=Path("."), description="Project root receiving the outputs")
    vibe_dir: str = Field(default=".vibe")
    config_filename: str = Field(default="vibe-project.config.json")
    context_filename: str = Field(default="ai-context.md")
    schema_ref: str = Field(default="./schemas/vibe-project.schema.json")
    config_version: str = Field(default="1.0.0")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def config_path(self) -> Path:
        """Path to the generated ``vibe-project.config.json``."""
        return self.base_dir / self.config_filename

    @property
    def vibe_path(self) -> Path:
        """Root of the dotted ``.vibe/`` directory."""
        return self.base_dir / self.vibe_dir

    @property
    def context_path(self) -> Path:
        """Path to the AI context document (read, then overwritten)."""
        return self.vibe_path / self.context_filename

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, base_dir: Path | None = None) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            VIBE_BASE_DIR, VIBE_CONFIG_FILENAME, VIBE_CONTEXT_FILENAME.

        An explicit *base_dir* wins over ``VIBE_BASE_DIR``; with neither, the
        current working directory is used.
        """
        kwargs: dict[str, Any] = {}
        if base_dir is not None:
            kwargs["base_dir"] = Path(base_dir)
        elif os.environ.get("VIBE_BASE_DIR"):
            kwargs["base_dir"] = Path(os.environ["VIBE_BASE_DIR"])
        else:
            kwargs["base_dir"] = Path.cwd()
        if os.environ.get("VIBE_CONFIG_FILENAME"):
            kwargs["config_filename"] = os.environ["VIBE_CONFIG_FILENAME"]
        if os.environ.get("VIBE_CONTEXT_FILENAME"):
            kwargs["context_filename"] = os.environ["VIBE_CONTEXT_FILENAME"]
        return cls(**kwargs)
