"""vibekit -- questionnaire-driven project configuration for AI assistants.

Asks a short questionnaire about a planned application and writes
``vibe-project.config.json`` plus a filled-in ``.vibe/ai-context.md``.

Quick usage::

    import asyncio
    from pathlib import Path

    from vibekit import QUICK, Config, SetupPipeline

    pipeline = SetupPipeline(Config(base_dir=Path("./my-app")), QUICK)
    result = asyncio.run(pipeline.run())
"""

from vibekit.config import Config
from vibekit.errors import TemplateNotFoundError, VibeError
from vibekit.pipeline import SetupPipeline, SetupResult
from vibekit.variants import FULL, QUICK, Variant

__version__ = "1.0.0"

__all__ = [
    "FULL",
    "QUICK",
    "Config",
    "SetupPipeline",
    "SetupResult",
    "TemplateNotFoundError",
    "Variant",
    "VibeError",
]
