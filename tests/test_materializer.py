"""Tests for the context materializer.

Covers:
- substitute_placeholders: global replacement, idempotence, untouched text
- materialize: strict vs lenient template handling, overwrite behaviour,
  write ordering, error propagation
- seed_template
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest

from vibekit.config import Config
from vibekit.errors import TemplateNotFoundError, VibeError
from vibekit.materializer import ContextMaterializer, substitute_placeholders
from vibekit.questionnaire.models import AnswerSet
from vibekit.synthesizer.profile import FULL_PROFILE
from vibekit.synthesizer.synthesizer import synthesize


@pytest.fixture
def project(foo_answers: AnswerSet):
    return synthesize(foo_answers, FULL_PROFILE, date(2024, 3, 15))


@pytest.fixture
def sample_template(templated_config: Config) -> str:
    return templated_config.context_path.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# substitute_placeholders
# ---------------------------------------------------------------------------

class TestSubstitutePlaceholders:
    @pytest.mark.unit
    def test_all_tokens_replaced_globally(self, project, sample_template: str):
        result = substitute_placeholders(sample_template, project.metadata)
        assert result == (
            "# Foo\n"
            "\n"
            "Type: api\n"
            "Domain: finance\n"
            "Status: planning\n"
            "\n"
            "Working on Foo (api).\n"
        )

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "document",
        [
            "",
            "no tokens at all",
            "[PROJECT_NAME]",
            "[DOMAIN][DOMAIN][DOMAIN]",
            "[STATUS] and [PROJECT_TYPE] and [STATUS]",
            "# [PROJECT_NAME]\n\n- [PROJECT_TYPE] / [DOMAIN] / [STATUS]\n" * 3,
        ],
    )
    def test_idempotent(self, project, document: str):
        once = substitute_placeholders(document, project.metadata)
        twice = substitute_placeholders(once, project.metadata)
        assert once == twice
        for token in ("[PROJECT_NAME]", "[PROJECT_TYPE]", "[DOMAIN]", "[STATUS]"):
            assert token not in once

    @pytest.mark.unit
    def test_other_brackets_untouched(self, project):
        document = "[PROJECT_NAME] [OWNER] [project_name] {PROJECT_NAME}"
        assert substitute_placeholders(document, project.metadata) == (
            "Foo [OWNER] [project_name] {PROJECT_NAME}"
        )

    @pytest.mark.unit
    def test_values_inserted_literally(self, foo_answers: AnswerSet):
        answers = foo_answers.model_copy(update={"name": r"C:\dir $1 \g<0>"})
        project = synthesize(answers, FULL_PROFILE, date(2024, 3, 15))
        assert substitute_placeholders("[PROJECT_NAME]", project.metadata) == r"C:\dir $1 \g<0>"


# ---------------------------------------------------------------------------
# materialize
# ---------------------------------------------------------------------------

class TestMaterialize:
    @pytest.mark.unit
    async def test_writes_both_files(self, templated_config: Config, project):
        result = await ContextMaterializer(templated_config).materialize(project)

        assert result.config_path == templated_config.config_path
        assert result.context_updated is True

        data = json.loads(templated_config.config_path.read_text(encoding="utf-8"))
        assert data["metadata"]["name"] == "Foo"
        assert data["$schema"] == "./schemas/vibe-project.schema.json"

        document = templated_config.context_path.read_text(encoding="utf-8")
        assert document.startswith("# Foo\n")
        assert "[STATUS]" not in document

    @pytest.mark.unit
    async def test_config_is_pretty_printed(self, templated_config: Config, project):
        await ContextMaterializer(templated_config).materialize(project)
        text = templated_config.config_path.read_text(encoding="utf-8")
        assert text.startswith('{\n  "$schema": ')
        assert '\n    "name": "Foo",' in text

    @pytest.mark.unit
    async def test_overwrites_previous_config(self, templated_config: Config, project):
        templated_config.config_path.write_text('{"stale": true, "padding": "' + "x" * 5000 + '"}')
        await ContextMaterializer(templated_config).materialize(project)
        data = json.loads(templated_config.config_path.read_text(encoding="utf-8"))
        assert "stale" not in data

    @pytest.mark.unit
    async def test_strict_missing_template_aborts_before_writing(self, config: Config, project):
        materializer = ContextMaterializer(config, require_template=True)
        with pytest.raises(TemplateNotFoundError) as exc_info:
            await materializer.materialize(project)

        assert isinstance(exc_info.value, FileNotFoundError)
        assert isinstance(exc_info.value, VibeError)
        assert exc_info.value.path == config.context_path
        assert not config.config_path.exists()

    @pytest.mark.unit
    async def test_lenient_missing_template_skips(self, config: Config, project):
        result = await ContextMaterializer(config, require_template=False).materialize(project)
        assert result.context_updated is False
        assert config.config_path.exists()
        assert not config.context_path.exists()

    @pytest.mark.unit
    async def test_missing_base_dir_propagates_oserror(self, tmp_path: Path, project):
        config = Config(base_dir=tmp_path / "does-not-exist")
        with pytest.raises(OSError):
            await ContextMaterializer(config, require_template=False).materialize(project)

    @pytest.mark.unit
    async def test_context_write_failure_leaves_config_written(
        self, templated_config: Config, project, sample_template: str
    ):
        real_write_text = Path.write_text

        def failing_write(self, *args, **kwargs):
            if self.name == templated_config.context_filename:
                raise PermissionError("denied")
            return real_write_text(self, *args, **kwargs)

        with patch.object(Path, "write_text", failing_write):
            with pytest.raises(PermissionError):
                await ContextMaterializer(templated_config).materialize(project)

        assert templated_config.config_path.exists()
        assert templated_config.context_path.read_text(encoding="utf-8") == sample_template

    @pytest.mark.unit
    async def test_read_template_returns_current_text(
        self, templated_config: Config, sample_template: str
    ):
        text = await ContextMaterializer(templated_config).read_template()
        assert text == sample_template


# ---------------------------------------------------------------------------
# seed_template
# ---------------------------------------------------------------------------

class TestSeedTemplate:
    @pytest.mark.unit
    def test_creates_vibe_dir_and_template(self, config: Config):
        path = ContextMaterializer(config).seed_template()
        assert path == config.context_path
        assert "[PROJECT_NAME]" in path.read_text(encoding="utf-8")

    @pytest.mark.unit
    def test_existing_template_kept(self, templated_config: Config, sample_template: str):
        ContextMaterializer(templated_config).seed_template()
        assert templated_config.context_path.read_text(encoding="utf-8") == sample_template

    @pytest.mark.unit
    def test_overwrite(self, templated_config: Config, sample_template: str):
        ContextMaterializer(templated_config).seed_template(overwrite=True)
        assert templated_config.context_path.read_text(encoding="utf-8") != sample_template
