"""ATS application drafting: form layouts, template fill, screening answers."""

from crew_ping_engine.ats.draft_pipeline import (
    ApplicationDraftPipeline,
    generate_application_draft,
)
from crew_ping_engine.ats.field_templates import match_choice_option, try_template_match
from crew_ping_engine.ats.match_score import compute_match_score
from crew_ping_engine.ats.platform_fields import default_fields_for, resolve_platform
from crew_ping_engine.ats.screening import (
    RuleBasedAnswerGenerator,
    find_relevant_excerpt,
    is_screening_question,
)

__all__ = [
    "ApplicationDraftPipeline",
    "RuleBasedAnswerGenerator",
    "compute_match_score",
    "default_fields_for",
    "find_relevant_excerpt",
    "generate_application_draft",
    "is_screening_question",
    "match_choice_option",
    "resolve_platform",
    "try_template_match",
]
