"""Config synthesizer: ``AnswerSet`` -> ``ProjectConfig``.

Pure and deterministic for a given answer set, profile and date.  Every
derived field (feature ids, hour estimates, constraint sentence, domain,
prompt sentences) is computed here and nowhere else.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional

from vibekit.questionnaire.models import (
    AnswerSet,
    Device,
    Domain,
    FeatureAnswer,
    TechnicalLevel,
    UsageFrequency,
)
from vibekit.synthesizer.models import (
    AIContext,
    AIPrompts,
    AISection,
    Audience,
    Feature,
    Features,
    Integration,
    PrimaryAudience,
    ProjectConfig,
    ProjectMetadata,
    Technical,
    TechnicalRequirements,
)
from vibekit.synthesizer.profile import FULL_PROFILE, SynthesisProfile
from vibekit.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

HOURS_BY_COMPLEXITY: dict[str, int] = {
    "simple": 8,
    "moderate": 24,
    "complex": 48,
}
UNKNOWN_COMPLEXITY_HOURS = 16

DEFAULT_DEVICES: list[Device] = [Device.DESKTOP, Device.MOBILE]

# Checked in this order; the sentence lists fragments in the same order.
CONSTRAINT_RULES: list[tuple[str, Any]] = [
    ("Must work offline", lambda a: a.needs_offline),
    ("Requires real-time updates", lambda a: a.needs_realtime),
    ("Must be mobile-friendly", lambda a: Device.MOBILE in a.devices),
    ("Keep interface simple and intuitive", lambda a: a.technical_level == TechnicalLevel.BEGINNER),
    ("Optimize for frequent use and efficiency", lambda a: a.usage_frequency == UsageFrequency.DAILY),
]
NO_CONSTRAINTS = "Standard web application constraints"


# ---------------------------------------------------------------------------
# Derivations
# ---------------------------------------------------------------------------


def estimate_hours(complexity: str) -> int:
    """Hours for a complexity level; unknown levels get 16."""
    key = getattr(complexity, "value", complexity)
    return HOURS_BY_COMPLEXITY.get(key, UNKNOWN_COMPLEXITY_HOURS)


def derive_constraints(answers: AnswerSet) -> str:
    """Comma-joined constraint sentence built from the answer flags.

    Mobile-friendliness follows the devices the user actually picked, not
    the desktop+mobile default substituted for an empty selection.
    """
    fragments = [text for text, applies in CONSTRAINT_RULES if applies(answers)]
    return ", ".join(fragments) if fragments else NO_CONSTRAINTS


def derive_domain(answers: AnswerSet, profile: SynthesisProfile) -> Domain:
    """Domain from the profile's type table, or the answered domain."""
    if profile.domain_by_type is None:
        return answers.domain
    return profile.domain_by_type.get(answers.type.value, profile.fallback_domain)


def effective_devices(answers: AnswerSet) -> list[Device]:
    """Selected devices, or desktop+mobile when nothing was selected."""
    return list(answers.devices) if answers.devices else list(DEFAULT_DEVICES)


def build_features(
    feature_answers: list[FeatureAnswer],
    profile: SynthesisProfile,
    renderer: TemplateRenderer,
) -> list[Feature]:
    """Number features ``feature-1..N`` and attach descriptions and estimates."""
    entries = feature_answers or [profile.default_feature]
    features: list[Feature] = []
    for position, entry in enumerate(entries, start=1):
        description = entry.description
        if description is None:
            description = renderer.render_string(
                profile.feature_description, {"name": entry.name}
            )
        features.append(
            Feature(
                id=f"feature-{position}",
                name=entry.name,
                description=description,
                priority=entry.priority,
                complexity=entry.complexity,
                estimated_hours=estimate_hours(entry.complexity),
            )
        )
    return features


# ---------------------------------------------------------------------------
# Synthesis
# ---------------------------------------------------------------------------


def synthesize(
    answers: AnswerSet,
    profile: SynthesisProfile = FULL_PROFILE,
    today: Optional[date] = None,
    *,
    schema_ref: str = "./schemas/vibe-project.schema.json",
    version: str = "1.0.0",
    renderer: Optional[TemplateRenderer] = None,
) -> ProjectConfig:
    """Build the ``ProjectConfig`` for a completed answer set.

    Args:
        answers: Frozen answers from the question runner.
        profile: Default table of the variant being run.
        today: Date stamped into ``created``/``lastUpdated``.  Defaults to
            the current UTC date.
        schema_ref: Value of the ``$schema`` key.
        version: Value of the ``version`` key.
        renderer: Jinja2 renderer for the profile's text templates.

    Returns:
        A new ``ProjectConfig``; *answers* is left untouched.
    """
    renderer = renderer or TemplateRenderer()
    stamp = (today or datetime.now(timezone.utc).date()).isoformat()
    devices = effective_devices(answers)
    context = _template_context(answers, devices)

    def fallback(value: str, template: str) -> str:
        return value or renderer.render_string(template, context)

    integrations: Optional[list[Integration]] = None
    if profile.include_integrations:
        integrations = [Integration(service=answers.integrations)] if answers.integrations else []

    return ProjectConfig(
        schema_ref=schema_ref,
        version=version,
        metadata=ProjectMetadata(
            name=answers.name,
            type=answers.type,
            domain=derive_domain(answers, profile),
            description=answers.description,
            created=stamp,
            last_updated=stamp,
        ),
        audience=Audience(
            primary=PrimaryAudience(
                demographics=answers.primary_users,
                technical_level=answers.technical_level,
                devices=devices,
                usage_frequency=answers.usage_frequency,
            )
        ),
        features=Features(core=build_features(answers.core_features, profile, renderer)),
        technical=Technical(
            requirements=TechnicalRequirements(
                authentication=answers.needs_auth,
                realtime=answers.needs_realtime,
                offline=answers.needs_offline,
                mobile=Device.MOBILE in answers.devices,
                pwa=answers.needs_offline,
                seo=True,
            ),
            integrations=integrations,
        ),
        deployment=profile.deployment.model_copy(deep=True) if profile.deployment else None,
        ai=AISection(
            context=AIContext(
                business_logic=fallback(answers.business_logic, profile.business_logic_default),
                user_workflows=fallback(answers.user_workflows, profile.user_workflows_default),
                constraints=derive_constraints(answers),
                priorities=fallback(answers.priorities, profile.priorities_default),
            ),
            prompts=AIPrompts(
                development=renderer.render_string(profile.development_prompt, context),
                testing=renderer.render_string(profile.testing_prompt, context),
                deployment=renderer.render_string(profile.deployment_prompt, context),
            ),
        ),
    )


def _template_context(answers: AnswerSet, devices: list[Device]) -> dict[str, Any]:
    context = answers.model_dump(mode="json")
    context["devices"] = [d.value for d in devices]
    return context
