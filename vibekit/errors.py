"""Exceptions raised by vibekit."""

from __future__ import annotations

from pathlib import Path


class VibeError(Exception):
    """Base class for vibekit errors."""


class TemplateNotFoundError(VibeError, FileNotFoundError):
    """The AI context document must exist before a run but does not."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"AI context template not found: {path} "
            "(create it, or rerun with --seed-template)"
        )
