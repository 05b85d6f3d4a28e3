"""Synthesis profiles: the default table a variant applies to its answers.

Text fields are Jinja2 inline templates rendered against the answer set
(enum values as plain strings, ``devices`` already defaulted).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from vibekit.questionnaire.models import DEFAULT_FEATURE, Domain, FeatureAnswer
from vibekit.synthesizer.models import Deployment


class SynthesisProfile(BaseModel):
    """Defaults and derivation rules for one pipeline variant."""

    name: str = Field(..., description="Variant identifier, e.g. 'full'")
    domain_by_type: Optional[dict[str, Domain]] = Field(
        default=None,
        description="Project type -> domain table; when unset the answered domain is kept",
    )
    fallback_domain: Domain = Field(default=Domain.OTHER)

    feature_description: str = Field(default="{{ name }} functionality")
    default_feature: FeatureAnswer = Field(default=DEFAULT_FEATURE)

    business_logic_default: str = Field(default="Focus on user needs and efficiency")
    user_workflows_default: str = Field(default="Standard user interaction patterns")
    priorities_default: str = Field(default="User experience and performance are critical")

    development_prompt: str = Field(
        default="Focus on {{ priorities or 'user experience' }} for {{ primary_users }}"
    )
    testing_prompt: str = Field(
        default=(
            "Emphasize "
            "{% if needs_offline %}offline functionality and {% endif %}"
            "{% if needs_realtime %}real-time features and {% endif %}"
            "core functionality"
        )
    )
    deployment_prompt: str = Field(default="Optimize for {{ devices | join(' and ') }} usage")

    include_integrations: bool = Field(
        default=True, description="Emit technical.integrations (empty list when none given)"
    )
    deployment: Optional[Deployment] = Field(default=None)


FULL_PROFILE = SynthesisProfile(name="full")

QUICK_DOMAINS: dict[str, Domain] = {
    "web-app": Domain.PRODUCTIVITY,
    "tool": Domain.PRODUCTIVITY,
    "dashboard": Domain.BUSINESS,
    "game": Domain.ENTERTAINMENT,
    "api": Domain.BUSINESS,
}

QUICK_FEATURE = DEFAULT_FEATURE.model_copy(
    update={"description": "Primary functionality of the application"}
)

QUICK_PROFILE = SynthesisProfile(
    name="quick",
    domain_by_type=QUICK_DOMAINS,
    default_feature=QUICK_FEATURE,
    business_logic_default="Focus on {{ priorities }} for {{ primary_users }}",
    priorities_default="user experience",
    development_prompt="Build a {{ type }} focused on {{ priorities }} for {{ primary_users }}",
    testing_prompt="Emphasize core functionality and user experience",
    deployment_prompt="Optimize for web deployment and performance",
    include_integrations=False,
    deployment=Deployment(),
)
