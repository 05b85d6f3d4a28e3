"""Pipeline variants: the full generator and the quick setup.

Both run through the same ``SetupPipeline``; a ``Variant`` bundles what
differs between them (questions, answer defaults, synthesis profile, how a
missing context template is treated, and the closing notes).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from vibekit.questionnaire.models import (
    Device,
    Domain,
    ProjectType,
    Question,
    QuestionKind,
    QuestionSet,
    TechnicalLevel,
    UsageFrequency,
)
from vibekit.synthesizer.profile import (
    FULL_PROFILE,
    QUICK_FEATURE,
    QUICK_PROFILE,
    SynthesisProfile,
)


class Variant(BaseModel):
    """Everything that distinguishes one generator flavour from another."""

    name: str
    title: str
    intro: str = ""
    question_set: QuestionSet
    profile: SynthesisProfile
    require_template: bool = Field(
        default=True, description="Abort when .vibe/ai-context.md is missing"
    )
    done_message: str = "Project configuration generated!"
    next_steps: list[str] = Field(default_factory=list)


def _values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


# ---------------------------------------------------------------------------
# Full generator
# ---------------------------------------------------------------------------

FULL_QUESTIONS = QuestionSet(
    name="full",
    questions=[
        Question(field="name", prompt="Project name: ", section="Project basics"),
        Question(
            field="type",
            kind=QuestionKind.CHOICE,
            prompt="Project type:",
            options=_values(ProjectType),
        ),
        Question(
            field="domain",
            kind=QuestionKind.CHOICE,
            prompt="Domain/theme:",
            options=[d.value for d in Domain if d is not Domain.BUSINESS],
        ),
        Question(field="description", prompt="One sentence description: "),
        Question(
            field="primary_users",
            prompt="Who will use this? (demographics, roles): ",
            section="Target Audience",
        ),
        Question(
            field="technical_level",
            kind=QuestionKind.CHOICE,
            prompt="Their technical level:",
            options=_values(TechnicalLevel),
        ),
        Question(
            field="usage_frequency",
            kind=QuestionKind.CHOICE,
            prompt="How often will they use it:",
            options=_values(UsageFrequency),
        ),
        Question(
            field="devices",
            kind=QuestionKind.MULTIPLE,
            prompt="Primary devices:",
            options=_values(Device),
        ),
        Question(field="core_features", kind=QuestionKind.FEATURES, section="Core Features"),
        Question(
            field="needs_auth",
            kind=QuestionKind.YES_NO,
            prompt="Need user accounts/login?",
            section="Technical Requirements",
        ),
        Question(
            field="needs_realtime",
            kind=QuestionKind.YES_NO,
            prompt="Need real-time features? (live updates, chat, etc.)",
        ),
        Question(field="needs_offline", kind=QuestionKind.YES_NO, prompt="Need to work offline?"),
        Question(
            field="integrations",
            prompt="Any specific integrations? (APIs, services - or press Enter to skip): ",
        ),
        Question(
            field="business_logic",
            prompt="Key business rules or constraints: ",
            section="Business Context",
        ),
        Question(
            field="user_workflows",
            prompt="Typical user workflow (what do users do step by step): ",
        ),
        Question(
            field="priorities",
            prompt="What matters most? (performance, features, simplicity, etc.): ",
        ),
    ],
)

FULL = Variant(
    name="full",
    title="Vibe Project Generator",
    intro="Answer these questions to generate your project config.",
    question_set=FULL_QUESTIONS,
    profile=FULL_PROFILE,
    require_template=True,
)


# ---------------------------------------------------------------------------
# Quick setup
# ---------------------------------------------------------------------------

QUICK_QUESTIONS = QuestionSet(
    name="quick",
    questions=[
        Question(field="name", prompt="1. Project name: ", default="My Project"),
        Question(
            field="type",
            kind=QuestionKind.CHOICE,
            prompt="2. Project type:",
            options=["web-app", "tool", "dashboard", "game", "api"],
            labels=[
                "Web App (React/Vue/etc)",
                "Tool/Utility",
                "Dashboard/Admin",
                "Game",
                "API/Backend",
            ],
        ),
        Question(
            field="description",
            prompt="3. What does it do? (one sentence): ",
            default="A {{ type }} that helps users accomplish their goals",
        ),
        Question(
            field="primary_users",
            prompt="4. Who will use it? (target audience): ",
            default="General users",
        ),
        Question(
            field="priorities",
            prompt="5. What matters most? (performance/features/simplicity): ",
            default="user experience",
        ),
    ],
    answer_defaults={
        "technical_level": TechnicalLevel.INTERMEDIATE,
        "usage_frequency": UsageFrequency.DAILY,
        "devices": [Device.DESKTOP, Device.MOBILE],
        "core_features": [QUICK_FEATURE],
        "needs_auth": False,
        "needs_realtime": False,
        "needs_offline": False,
    },
)

QUICK = Variant(
    name="quick",
    title="Quick Vibe Project Setup",
    intro="Just 5 questions to get AI-optimized configuration!",
    question_set=QUICK_QUESTIONS,
    profile=QUICK_PROFILE,
    require_template=False,
    done_message="Quick setup complete!",
    next_steps=[
        "Review vibe-project.config.json and adjust anything the defaults guessed",
        "Share .vibe/ai-context.md with your AI assistant",
        "For the full questionnaire: vibe-generate",
    ],
)

VARIANTS: dict[str, Variant] = {FULL.name: FULL, QUICK.name: QUICK}
