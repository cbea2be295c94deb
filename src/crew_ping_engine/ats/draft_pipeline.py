"""Application draft pipeline: template fill, screening answers, warnings."""

from __future__ import annotations

import structlog

from crew_ping_core.constants import (
    ACCEPT_TEMPLATE_CONFIDENCE,
    LOW_MATCH_WARNING_THRESHOLD,
    SYNTHESIZED_CONFIDENCE,
)
from crew_ping_core.interfaces.answer_generator import ScreeningAnswerGenerator
from crew_ping_core.interfaces.clock import Clock, utc_now
from crew_ping_core.models.application import (
    AnswerSource,
    ApplicationDraft,
    ATSFieldSpec,
    FieldAnswer,
)
from crew_ping_core.models.candidate import CandidateProfile
from crew_ping_core.models.job import JobPosting
from crew_ping_engine.ats.field_templates import try_template_match
from crew_ping_engine.ats.match_score import compute_match_score
from crew_ping_engine.ats.platform_fields import default_fields_for, resolve_platform
from crew_ping_engine.ats.screening import (
    COVER_LETTER_FIELD,
    RuleBasedAnswerGenerator,
    is_screening_question,
)
from crew_ping_engine.text.normalize import missing_certs

logger = structlog.get_logger()


class ApplicationDraftPipeline:
    """Build an ``ApplicationDraft`` for one (profile, job) pair.

    The answer generator and clock are injectable; the defaults are the
    deterministic rule-based generator and the UTC wall clock.
    """

    def __init__(
        self,
        generator: ScreeningAnswerGenerator | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize with an answer generator and clock."""
        self.generator: ScreeningAnswerGenerator = generator or RuleBasedAnswerGenerator()
        self.clock: Clock = clock or utc_now

    def generate(
        self,
        profile: CandidateProfile,
        job: JobPosting,
        fields: list[ATSFieldSpec] | None = None,
    ) -> ApplicationDraft:
        """Fill every field, write a cover letter and flag items for review."""
        platform = resolve_platform(job.ats_type)
        fields_to_fill = fields if fields is not None else default_fields_for(platform)
        job_certs = job.required_certs
        match_score = compute_match_score(profile, job_certs, job.description, job.category)

        answers: list[FieldAnswer] = []
        warnings: list[str] = []
        for field in fields_to_fill:
            answer = self._fill_field(field, profile, job, warnings)
            if answer is not None:
                answers.append(answer)

        cover_letter = self.generator.generate_answer(profile, job, COVER_LETTER_FIELD)

        if match_score < LOW_MATCH_WARNING_THRESHOLD:
            warnings.append(
                f"Low match score ({match_score}/100): this role may require "
                f"certifications or experience you haven't listed."
            )
        missing = missing_certs(profile.certifications, job_certs)
        if missing:
            warnings.append(f"Missing certifications: {', '.join(missing)}")

        draft = ApplicationDraft(
            job_id=job.id,
            job_title=job.title,
            company=job.company,
            ats_platform=platform,
            fields=answers,
            cover_letter=cover_letter,
            match_score=match_score,
            warnings=warnings,
            generated_at=self.clock(),
        )
        logger.info(
            "application_draft_generated",
            job_id=job.id,
            ats_platform=platform.value,
            fields=len(answers),
            match_score=match_score,
            warnings=len(warnings),
        )
        return draft

    def _fill_field(
        self,
        field: ATSFieldSpec,
        profile: CandidateProfile,
        job: JobPosting,
        warnings: list[str],
    ) -> FieldAnswer | None:
        """Resolve one field, appending any review warnings."""
        template = try_template_match(field, profile)
        if template is not None and template.confidence >= ACCEPT_TEMPLATE_CONFIDENCE:
            return template

        if is_screening_question(field):
            return FieldAnswer(
                field_id=field.field_id,
                value=self.generator.generate_answer(profile, job, field),
                source=AnswerSource.SYNTHESIZED,
                confidence=SYNTHESIZED_CONFIDENCE,
            )

        if template is not None:
            if field.required and not template.value:
                warnings.append(_unfilled_warning(field))
            else:
                warnings.append(f'"{field.label}" may need manual review: low confidence match.')
            return template

        if field.required:
            warnings.append(_unfilled_warning(field))
            return FieldAnswer(
                field_id=field.field_id,
                value="",
                source=AnswerSource.TEMPLATE,
                confidence=0.0,
            )

        logger.debug("field_skipped", field_id=field.field_id, job_id=job.id)
        return None


def _unfilled_warning(field: ATSFieldSpec) -> str:
    return f'"{field.label}" could not be auto-filled. Please complete it manually.'


def generate_application_draft(
    profile: CandidateProfile,
    job: JobPosting,
    fields: list[ATSFieldSpec] | None = None,
    *,
    generator: ScreeningAnswerGenerator | None = None,
    clock: Clock | None = None,
) -> ApplicationDraft:
    """Convenience wrapper around ``ApplicationDraftPipeline.generate``."""
    return ApplicationDraftPipeline(generator=generator, clock=clock).generate(
        profile, job, fields
    )
