"""Shared pytest fixtures for the vibekit test suite.

Provides reusable fixtures for:
- Quiet Rich consoles that capture questionnaire output
- Temporary project roots with and without an AI context template
- Scripted answer sequences for the full and quick questionnaires
- Pre-built answer sets (including the "Foo" reference scenario)
"""

from __future__ import annotations

import io
from datetime import date
from pathlib import Path

import pytest
from rich.console import Console

from vibekit.config import Config
from vibekit.questionnaire.models import AnswerSet, FeatureAnswer


FIXED_DATE = date(2024, 3, 15)

SAMPLE_TEMPLATE = (
    "# [PROJECT_NAME]\n"
    "\n"
    "Type: [PROJECT_TYPE]\n"
    "Domain: [DOMAIN]\n"
    "Status: [STATUS]\n"
    "\n"
    "Working on [PROJECT_NAME] ([PROJECT_TYPE]).\n"
)


# ---------------------------------------------------------------------------
# Consoles
# ---------------------------------------------------------------------------

@pytest.fixture
def quiet_console() -> Console:
    """Rich console writing to an in-memory buffer (read via ``.file.getvalue()``)."""
    return Console(file=io.StringIO(), force_terminal=False, width=120)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty project root (no ``.vibe/`` directory)."""
    root = tmp_path / "my-app"
    root.mkdir()
    yield root


@pytest.fixture
def templated_root(project_root: Path) -> Path:
    """Project root with ``.vibe/ai-context.md`` holding ``SAMPLE_TEMPLATE``."""
    vibe = project_root / ".vibe"
    vibe.mkdir()
    (vibe / "ai-context.md").write_text(SAMPLE_TEMPLATE, encoding="utf-8")
    yield project_root


@pytest.fixture
def config(project_root: Path) -> Config:
    return Config(base_dir=project_root)


@pytest.fixture
def templated_config(templated_root: Path) -> Config:
    return Config(base_dir=templated_root)


# ---------------------------------------------------------------------------
# Answer sets
# ---------------------------------------------------------------------------

@pytest.fixture
def foo_answers() -> AnswerSet:
    """The reference scenario: an expert-facing finance API with one feature."""
    return AnswerSet(
        name="Foo",
        type="api",
        domain="finance",
        description="d",
        primary_users="devs",
        technical_level="expert",
        usage_frequency="weekly",
        devices=[],
        core_features=[
            FeatureAnswer(name="Sync", priority="critical", complexity="complex"),
        ],
        needs_auth=True,
        needs_realtime=False,
        needs_offline=False,
        integrations="",
        business_logic="",
        user_workflows="",
        priorities="",
    )


@pytest.fixture
def rich_answers() -> AnswerSet:
    """Every flag set, several features, all free text filled in."""
    return AnswerSet(
        name="Chatterbox",
        type="mobile-app",
        domain="entertainment",
        description="Group chat for gamers",
        primary_users="teenage gamers",
        technical_level="beginner",
        usage_frequency="daily",
        devices=["mobile", "tablet"],
        core_features=[
            FeatureAnswer(name="Rooms", priority="critical", complexity="moderate"),
            FeatureAnswer(name="Emoji", priority="low", complexity="simple"),
            FeatureAnswer(name="Voice", priority="high", complexity="complex"),
        ],
        needs_auth=True,
        needs_realtime=True,
        needs_offline=True,
        integrations="Discord API",
        business_logic="No ads for minors",
        user_workflows="Open app, join room, chat",
        priorities="latency",
    )


# ---------------------------------------------------------------------------
# Scripted terminal input
# ---------------------------------------------------------------------------

@pytest.fixture
def foo_script() -> list[str]:
    """Terminal lines that produce ``foo_answers`` through the full questionnaire."""
    return [
        "Foo",        # name
        "5",          # type -> api
        "6",          # domain -> finance
        "d",          # description
        "devs",       # primary users
        "3",          # technical level -> expert
        "2",          # usage frequency -> weekly
        "",           # devices -> none
        "Sync",       # feature 1 name
        "1",          # priority -> critical
        "3",          # complexity -> complex
        "",           # finish features
        "y",          # auth
        "n",          # realtime
        "",           # offline
        "",           # integrations
        "",           # business logic
        "",           # workflows
        "",           # priorities
    ]


@pytest.fixture
def quick_script() -> list[str]:
    """Terminal lines for the quick setup: a game with defaults for the rest."""
    return ["Space Race", "4", "", "", "fun"]
