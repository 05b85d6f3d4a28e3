"""vibekit questionnaire.

Asks the questions of a ``QuestionSet`` over an injectable line channel and
returns a typed ``AnswerSet``.

Usage::

    from vibekit.questionnaire import QuestionRunner, ScriptedPrompter

    runner = QuestionRunner(ScriptedPrompter(["Foo", "5", ...]))
    answers = runner.run(question_set)
"""

from vibekit.questionnaire.models import (
    DEFAULT_FEATURE,
    AnswerSet,
    Complexity,
    Device,
    Domain,
    FeatureAnswer,
    Priority,
    ProjectType,
    Question,
    QuestionKind,
    QuestionSet,
    TechnicalLevel,
    UsageFrequency,
)
from vibekit.questionnaire.prompter import ConsolePrompter, Prompter, ScriptedPrompter
from vibekit.questionnaire.runner import QuestionRunner

__all__ = [
    "DEFAULT_FEATURE",
    "AnswerSet",
    "Complexity",
    "ConsolePrompter",
    "Device",
    "Domain",
    "FeatureAnswer",
    "Priority",
    "ProjectType",
    "Prompter",
    "Question",
    "QuestionKind",
    "QuestionRunner",
    "QuestionSet",
    "ScriptedPrompter",
    "TechnicalLevel",
    "UsageFrequency",
]
