"""vibekit setup pipeline.

Runs one questionnaire variant end to end:

Stage 1: ASK        -- question runner collects an ``AnswerSet``.
Stage 2: SYNTHESIZE -- answers become a ``ProjectConfig``.
Stage 3: MATERIALIZE -- config JSON and AI context document are written.

Usage::

    vibe-generate                       # full questionnaire
    vibe-quick-setup --base-dir ./app   # five questions
    python -m vibekit.pipeline quick --seed-template
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from vibekit.config import Config
from vibekit.materializer import ContextMaterializer, MaterializeResult
from vibekit.questionnaire.models import AnswerSet
from vibekit.questionnaire.prompter import Prompter, ScriptedPrompter
from vibekit.questionnaire.runner import QuestionRunner
from vibekit.synthesizer.models import ProjectConfig
from vibekit.synthesizer.synthesizer import synthesize
from vibekit.templates import TemplateRenderer
from vibekit.utils import (
    console as default_console,
    print_error,
    print_header,
    print_success,
    print_summary_table,
)
from vibekit.variants import FULL, QUICK, VARIANTS, Variant


class SetupResult(BaseModel):
    """Everything one run produced."""

    variant: str
    answers: AnswerSet
    project: ProjectConfig
    outputs: MaterializeResult


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class SetupPipeline:
    """Ask -> synthesize -> materialize for a single ``Variant``.

    Attributes:
        config: Output locations.
        variant: Questions, defaults and template policy being run.
        runner: Question runner bound to the prompter and console.
        materializer: Writes the outputs under ``config.base_dir``.
    """

    def __init__(
        self,
        config: Config,
        variant: Variant,
        prompter: Optional[Prompter] = None,
        console: Optional[Console] = None,
        today: Optional[date] = None,
    ) -> None:
        self.config = config
        self.variant = variant
        self.console = console or default_console
        self.today = today
        self.renderer = TemplateRenderer()
        self.runner = QuestionRunner(prompter, self.console, self.renderer)
        self.materializer = ContextMaterializer(
            config, require_template=variant.require_template
        )

    async def run(self) -> SetupResult:
        """Run all three stages; errors propagate to the caller."""
        print_header(self.variant.title, self.variant.intro, self.console)

        answers = self.runner.run(self.variant.question_set)
        project = synthesize(
            answers,
            self.variant.profile,
            self.today,
            schema_ref=self.config.schema_ref,
            version=self.config.config_version,
            renderer=self.renderer,
        )
        outputs = await self.materializer.materialize(project)

        self._report(project, outputs)
        return SetupResult(
            variant=self.variant.name, answers=answers, project=project, outputs=outputs
        )

    def _report(self, project: ProjectConfig, outputs: MaterializeResult) -> None:
        self.console.print()
        print_success(self.variant.done_message, self.console)
        print_summary_table(
            {
                "Name": escape(project.metadata.name),
                "Type": project.metadata.type.value,
                "Domain": project.metadata.domain.value,
                "Features": str(len(project.features.core)),
                "Config": escape(str(outputs.config_path)),
                "AI context": (
                    escape(str(outputs.context_path))
                    if outputs.context_updated
                    else "[dim]skipped (no template)[/dim]"
                ),
            },
            title="Generated project",
            out=self.console,
        )
        if self.variant.next_steps:
            self.console.print("[bold]Next steps:[/bold]")
            for step in self.variant.next_steps:
                self.console.print(f"  - {escape(step)}")


# ---------------------------------------------------------------------------
# CLI entry points
# ---------------------------------------------------------------------------


def build_parser(prog: Optional[str] = None, with_variant: bool = False) -> argparse.ArgumentParser:
    """Argument parser shared by both entry points."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Generate vibe-project.config.json and .vibe/ai-context.md from a questionnaire",
    )
    if with_variant:
        parser.add_argument(
            "variant",
            nargs="?",
            choices=sorted(VARIANTS),
            default=FULL.name,
            help="Questionnaire to run (default: full)",
        )
    parser.add_argument(
        "--base-dir", "-d",
        default=None,
        help="Project root receiving the outputs (default: $VIBE_BASE_DIR, else the current directory)",
    )
    parser.add_argument(
        "--seed-template",
        action="store_true",
        help="Write the bundled .vibe/ai-context.md first if it does not exist",
    )
    parser.add_argument(
        "--answers",
        default=None,
        help="Read answers from this file, one per line, instead of the terminal",
    )
    return parser


def run_cli(variant: Variant, argv: Optional[list[str]] = None, prog: Optional[str] = None) -> int:
    """Parse *argv*, run *variant* and return the process exit code."""
    args = build_parser(prog).parse_args(argv)
    return _execute(variant, args)


def _execute(variant: Variant, args: argparse.Namespace) -> int:
    base_dir = Path(args.base_dir) if args.base_dir else None
    config = Config.from_env(base_dir=base_dir)

    prompter: Optional[Prompter] = None
    try:
        if args.answers:
            lines = Path(args.answers).read_text(encoding="utf-8").splitlines()
            prompter = ScriptedPrompter(lines)

        pipeline = SetupPipeline(config, variant, prompter=prompter)
        if args.seed_template:
            pipeline.materializer.seed_template()
        asyncio.run(pipeline.run())
    except (KeyboardInterrupt, EOFError):
        default_console.print()
        print_error("Setup aborted.")
        return 1
    except Exception as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1
    return 0


def main_generate(argv: Optional[list[str]] = None) -> None:
    """``vibe-generate``: the full questionnaire."""
    sys.exit(run_cli(FULL, argv, prog="vibe-generate"))


def main_quick(argv: Optional[list[str]] = None) -> None:
    """``vibe-quick-setup``: five questions, defaults for the rest."""
    sys.exit(run_cli(QUICK, argv, prog="vibe-quick-setup"))


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``python -m vibekit.pipeline``."""
    args = build_parser("vibekit", with_variant=True).parse_args(argv)
    sys.exit(_execute(VARIANTS[args.variant], args))


if __name__ == "__main__":
    main()
