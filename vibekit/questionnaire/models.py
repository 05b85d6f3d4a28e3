"""Pydantic v2 models for the vibekit questionnaire.

Defines the answer records produced by a questionnaire run and the
declarative descriptors (``Question``, ``QuestionSet``) that drive it.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ProjectType(str, Enum):
    """Kind of application being planned."""
    WEB_APP = "web-app"
    TOOL = "tool"
    DASHBOARD = "dashboard"
    GAME = "game"
    API = "api"
    MOBILE_APP = "mobile-app"


class Domain(str, Enum):
    """Domain or theme of the application."""
    PRODUCTIVITY = "productivity"
    ENTERTAINMENT = "entertainment"
    EDUCATION = "education"
    ECOMMERCE = "ecommerce"
    HEALTHCARE = "healthcare"
    FINANCE = "finance"
    BUSINESS = "business"
    OTHER = "other"


class TechnicalLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


class UsageFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    OCCASIONAL = "occasional"


class Device(str, Enum):
    DESKTOP = "desktop"
    MOBILE = "mobile"
    TABLET = "tablet"


class Priority(str, Enum):
    """Feature priority, most urgent first."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Complexity(str, Enum):
    """Estimated implementation complexity."""
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class QuestionKind(str, Enum):
    """How a question is asked and how its answer is typed."""
    TEXT = "text"
    CHOICE = "choice"
    MULTIPLE = "multiple"
    YES_NO = "yes_no"
    FEATURES = "features"


MAX_FEATURES = 5


# ---------------------------------------------------------------------------
# Answer records
# ---------------------------------------------------------------------------

class FeatureAnswer(BaseModel):
    """One core feature entered in the feature sub-form."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Feature name")
    priority: Priority = Field(default=Priority.CRITICAL)
    complexity: Complexity = Field(default=Complexity.MODERATE)
    description: Optional[str] = Field(
        default=None,
        description="Fixed wording for placeholder features; derived from the name when unset",
    )


DEFAULT_FEATURE = FeatureAnswer(
    name="Main Feature", priority=Priority.CRITICAL, complexity=Complexity.MODERATE
)


class AnswerSet(BaseModel):
    """Complete set of responses from one questionnaire run.

    Frozen: once built by the runner it is handed to the synthesizer as-is.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(default="")
    type: ProjectType = Field(default=ProjectType.WEB_APP)
    domain: Domain = Field(default=Domain.OTHER)
    description: str = Field(default="")
    primary_users: str = Field(default="")
    technical_level: TechnicalLevel = Field(default=TechnicalLevel.INTERMEDIATE)
    usage_frequency: UsageFrequency = Field(default=UsageFrequency.DAILY)
    devices: list[Device] = Field(default_factory=list)
    core_features: list[FeatureAnswer] = Field(
        default_factory=list, max_length=MAX_FEATURES
    )
    needs_auth: bool = Field(default=False)
    needs_realtime: bool = Field(default=False)
    needs_offline: bool = Field(default=False)
    integrations: str = Field(default="")
    business_logic: str = Field(default="")
    user_workflows: str = Field(default="")
    priorities: str = Field(default="")


# ---------------------------------------------------------------------------
# Questionnaire descriptors
# ---------------------------------------------------------------------------

class Question(BaseModel):
    """A single step of a questionnaire."""
    field: str = Field(..., description="AnswerSet field filled by this question")
    kind: QuestionKind = Field(default=QuestionKind.TEXT)
    prompt: str = Field(default="", description="Prompt or menu heading shown to the user")
    options: list[str] = Field(
        default_factory=list, description="Values returned by choice/multiple questions"
    )
    labels: list[str] = Field(
        default_factory=list,
        description="Display labels for options; falls back to the option values",
    )
    section: Optional[str] = Field(
        default=None, description="Section heading printed before the question"
    )
    default: Optional[str] = Field(
        default=None,
        description="Jinja2 template used when a text answer is empty",
    )


class QuestionSet(BaseModel):
    """Ordered questions plus the answers every run starts from."""
    name: str = Field(..., description="Short identifier, e.g. 'full' or 'quick'")
    questions: list[Question] = Field(default_factory=list)
    answer_defaults: dict[str, Any] = Field(
        default_factory=dict,
        description="AnswerSet values for fields the questions never ask",
    )

    def fields(self) -> list[str]:
        """Return the AnswerSet fields covered by the questions, in order."""
        return [q.field for q in self.questions]
