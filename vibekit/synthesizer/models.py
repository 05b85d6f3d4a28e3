"""Pydantic v2 models for the generated ``vibe-project.config.json``.

Field names are snake_case in Python and serialised as camelCase; dump with
``by_alias=True`` to get the on-disk shape.  Optional groups that a variant
does not produce are ``None`` and left out with ``exclude_none=True``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vibekit.questionnaire.models import (
    Complexity,
    Device,
    Domain,
    Priority,
    ProjectType,
    TechnicalLevel,
    UsageFrequency,
)


class CamelModel(BaseModel):
    """Base model serialising field names as camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Metadata & Audience
# ---------------------------------------------------------------------------

class ProjectMetadata(CamelModel):
    name: str
    type: ProjectType
    domain: Domain
    description: str = ""
    status: str = "planning"
    created: str = Field(..., description="ISO date (yyyy-mm-dd)")
    last_updated: str = Field(..., description="ISO date (yyyy-mm-dd)")


class PrimaryAudience(CamelModel):
    demographics: str = ""
    technical_level: TechnicalLevel = TechnicalLevel.INTERMEDIATE
    devices: list[Device] = Field(default_factory=list)
    usage_frequency: UsageFrequency = UsageFrequency.DAILY


class Audience(CamelModel):
    primary: PrimaryAudience


# ---------------------------------------------------------------------------
# Features
# ---------------------------------------------------------------------------

class Feature(CamelModel):
    """A core feature with its generated id and effort estimate."""
    id: str = Field(..., description="'feature-N', N being the 1-based position")
    name: str
    description: str = ""
    priority: Priority
    complexity: Complexity
    estimated_hours: int


class Features(CamelModel):
    core: list[Feature] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Technical
# ---------------------------------------------------------------------------

class TechnicalStack(CamelModel):
    frontend: str = "react"
    backend: str = "none"
    database: str = "none"
    styling: str = "tailwind"
    state_management: str = "zustand"


class TechnicalRequirements(CamelModel):
    authentication: bool = False
    realtime: bool = False
    offline: bool = False
    mobile: bool = False
    pwa: bool = False
    seo: bool = True


class Integration(CamelModel):
    service: str
    purpose: str = "As specified by user"
    required: bool = True


class Technical(CamelModel):
    stack: TechnicalStack = Field(default_factory=TechnicalStack)
    requirements: TechnicalRequirements = Field(default_factory=TechnicalRequirements)
    integrations: Optional[list[Integration]] = None


# ---------------------------------------------------------------------------
# Testing (constant for every run)
# ---------------------------------------------------------------------------

class Coverage(CamelModel):
    target: int = 80
    critical: int = 95


class Automation(CamelModel):
    pre_commit: bool = True
    ci: bool = True
    deployment: bool = True


class TestingPolicy(CamelModel):
    coverage: Coverage = Field(default_factory=Coverage)
    types: list[str] = Field(
        default_factory=lambda: [
            "unit",
            "integration",
            "accessibility",
            "performance",
            "security",
        ]
    )
    automation: Automation = Field(default_factory=Automation)


# ---------------------------------------------------------------------------
# Deployment
# ---------------------------------------------------------------------------

class DeploymentEnvironment(CamelModel):
    staging: str = ""
    production: str = ""


class Deployment(CamelModel):
    platform: str = "vercel"
    domain: str = ""
    environment: DeploymentEnvironment = Field(default_factory=DeploymentEnvironment)


# ---------------------------------------------------------------------------
# AI context
# ---------------------------------------------------------------------------

class AIContext(CamelModel):
    business_logic: str
    user_workflows: str
    constraints: str
    priorities: str


class AIPrompts(CamelModel):
    development: str
    testing: str
    deployment: str


class AISection(CamelModel):
    context: AIContext
    prompts: AIPrompts


# ---------------------------------------------------------------------------
# Top-level document
# ---------------------------------------------------------------------------

class ProjectConfig(CamelModel):
    """The persisted project description."""
    schema_ref: str = Field(default="./schemas/vibe-project.schema.json", alias="$schema")
    version: str = "1.0.0"
    metadata: ProjectMetadata
    audience: Audience
    features: Features
    technical: Technical = Field(default_factory=Technical)
    testing: TestingPolicy = Field(default_factory=TestingPolicy)
    deployment: Optional[Deployment] = None
    ai: AISection

    def to_json(self) -> str:
        """Serialise to the on-disk JSON shape (2-space indent, camelCase)."""
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True)
