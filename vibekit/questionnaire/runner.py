"""Question runner: turns a ``QuestionSet`` into an ``AnswerSet``.

Every question blocks on the injected ``Prompter`` until one line is
available.  Malformed input never raises: out-of-range or non-numeric
selections degrade to defaults and a notice is printed.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape

from vibekit.questionnaire.models import (
    DEFAULT_FEATURE,
    MAX_FEATURES,
    AnswerSet,
    Complexity,
    FeatureAnswer,
    Priority,
    Question,
    QuestionKind,
    QuestionSet,
)
from vibekit.questionnaire.prompter import ConsolePrompter, Prompter
from vibekit.templates import TemplateRenderer
from vibekit.utils import console as default_console
from vibekit.utils import print_notice, print_section

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

PRIORITY_OPTIONS = [p.value for p in Priority]
COMPLEXITY_OPTIONS = [c.value for c in Complexity]


class QuestionRunner:
    """Asks typed questions over a line-oriented channel.

    Args:
        prompter: Source of answer lines.  Defaults to the terminal.
        console: Where menus, headings and notices are printed.
        renderer: Renders the Jinja2 defaults attached to text questions.
    """

    def __init__(
        self,
        prompter: Prompter | None = None,
        console: Console | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.console = console or default_console
        self.prompter = prompter or ConsolePrompter(self.console)
        self.renderer = renderer or TemplateRenderer()

    # -- Primitive questions -----------------------------------------------

    def ask(self, prompt: str) -> str:
        """Read one line and strip surrounding whitespace."""
        return self.prompter.prompt(prompt).strip()

    def ask_choice(
        self, prompt: str, options: list[str], labels: Optional[list[str]] = None
    ) -> str:
        """Show a numbered menu and return the selected option.

        Anything outside ``1..len(options)`` (including non-numbers) selects
        ``options[0]``.
        """
        self._print_menu(prompt, options, labels)
        answer = self.ask(f"Choose (1-{len(options)}): ")
        index = _parse_index(answer)
        if index is not None and 0 <= index < len(options):
            return options[index]
        print_notice("Invalid choice, using first option.", self.console)
        return options[0]

    def ask_multiple(self, prompt: str, options: list[str]) -> list[str]:
        """Return the options picked by a comma-separated list of numbers.

        Out-of-range and non-numeric entries are dropped.  Repeated numbers
        are kept, so ``"1,1"`` yields the first option twice.
        """
        self._print_menu(
            f"{prompt} (select multiple by number, separated by commas)", options
        )
        answer = self.ask("Choose (e.g., 1,2): ")
        selected: list[str] = []
        for part in answer.split(","):
            index = _parse_index(part)
            if index is not None and 0 <= index < len(options):
                selected.append(options[index])
        return selected

    def ask_yes_no(self, prompt: str) -> bool:
        """True iff the answer starts with ``y`` (case-insensitive)."""
        return self.ask(f"{prompt} (y/n): ").lower().startswith("y")

    def ask_features(self) -> list[FeatureAnswer]:
        """Collect up to ``MAX_FEATURES`` features; empty name finishes."""
        features: list[FeatureAnswer] = []
        self.console.print("Enter your core features (press Enter with empty input to finish):")

        while True:
            name = self.ask(f"Feature {len(features) + 1} name (or Enter to finish): ")
            if not name:
                break

            priority = self.ask_choice("Priority:", PRIORITY_OPTIONS)
            complexity = self.ask_choice("Complexity:", COMPLEXITY_OPTIONS)
            features.append(
                FeatureAnswer(name=name, priority=priority, complexity=complexity)
            )

            if len(features) >= MAX_FEATURES:
                print_notice(
                    f"Maximum {MAX_FEATURES} core features recommended.", self.console
                )
                break

        return features or [DEFAULT_FEATURE]

    # -- Question sets -----------------------------------------------------

    def run(self, question_set: QuestionSet) -> AnswerSet:
        """Ask every question in order and build a frozen ``AnswerSet``."""
        answers: dict[str, Any] = dict(question_set.answer_defaults)
        for question in question_set.questions:
            if question.section:
                print_section(question.section, self.console)
            answers[question.field] = self.ask_question(question, answers)
        return AnswerSet(**answers)

    def ask_question(self, question: Question, answers: dict[str, Any]) -> Any:
        """Dispatch a single ``Question`` to the matching primitive.

        *answers* holds everything collected so far; text defaults are
        rendered against it.
        """
        if question.kind == QuestionKind.CHOICE:
            return self.ask_choice(question.prompt, question.options, question.labels or None)
        if question.kind == QuestionKind.MULTIPLE:
            return self.ask_multiple(question.prompt, question.options)
        if question.kind == QuestionKind.YES_NO:
            return self.ask_yes_no(question.prompt)
        if question.kind == QuestionKind.FEATURES:
            return self.ask_features()

        answer = self.ask(question.prompt)
        if not answer and question.default is not None:
            answer = self.renderer.render_string(question.default, _template_context(answers))
        return answer

    # -- Internal helpers --------------------------------------------------

    def _print_menu(
        self, prompt: str, options: list[str], labels: Optional[list[str]] = None
    ) -> None:
        self.console.print(escape(prompt))
        for number, label in enumerate(labels or options, start=1):
            self.console.print(f"  {number}. {escape(label)}")


def _parse_index(text: str) -> Optional[int]:
    """Parse a 1-based menu number into a 0-based index, or ``None``.

    Only the leading integer counts, so ``"2."`` and ``"2abc"`` both pick
    option 2.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1)) - 1


def _template_context(answers: dict[str, Any]) -> dict[str, Any]:
    """Plain values for Jinja2: enum members are rendered by value."""
    return {
        key: getattr(value, "value", value) for key, value in answers.items()
    }
