"""vibekit config synthesizer.

Maps a completed ``AnswerSet`` onto the nested ``ProjectConfig`` written to
``vibe-project.config.json``.  Pure: no I/O, no mutation of its input.

Usage::

    from vibekit.synthesizer import QUICK_PROFILE, synthesize

    project = synthesize(answers, QUICK_PROFILE)
    print(project.to_json())
"""

from vibekit.synthesizer.models import Feature, ProjectConfig, ProjectMetadata
from vibekit.synthesizer.profile import FULL_PROFILE, QUICK_PROFILE, SynthesisProfile
from vibekit.synthesizer.synthesizer import (
    derive_constraints,
    derive_domain,
    effective_devices,
    estimate_hours,
    synthesize,
)

__all__ = [
    "FULL_PROFILE",
    "QUICK_PROFILE",
    "Feature",
    "ProjectConfig",
    "ProjectMetadata",
    "SynthesisProfile",
    "derive_constraints",
    "derive_domain",
    "effective_devices",
    "estimate_hours",
    "synthesize",
]
