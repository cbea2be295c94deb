"""Rule-based answers for free-text screening questions.

``RuleBasedAnswerGenerator`` is the default ``ScreeningAnswerGenerator``.
It picks a template by question category (motivation, experience, salary,
start date, cover letter) and fills it from the profile and job posting.
Experience questions quote the resume sentences that share the most
keywords with the job.
"""

from __future__ import annotations

import re

from crew_ping_core.constants import (
    COVER_LETTER_MAX_LENGTH,
    DEFAULT_ANSWER_MAX_LENGTH,
    EXCERPT_MAX_SENTENCES,
    EXCERPT_MIN_SENTENCE_LENGTH,
    SCREENING_INDICATORS,
)
from crew_ping_core.models.application import ATSFieldSpec, FieldType
from crew_ping_core.models.candidate import CandidateProfile
from crew_ping_core.models.job import JobPosting
from crew_ping_engine.text.normalize import extract_keywords, truncate_words

_SENTENCE_SPLIT_RE = re.compile(r"[.!?\n]+")

_MOTIVATION_TARGETS = ("role", "position", "company", "job", "work here")
_EXPERIENCE_CUES = ("describe", "experience with", "tell us")
_SALARY_CUES = ("salary", "compensation", "pay")
_START_CUES = ("start", "available", "availability")
_COVER_LETTER_CUES = ("cover letter", "additional")

SALARY_ANSWER = (
    "Open to discussing compensation based on the full scope of the role "
    "and the project timeline."
)
START_DATE_ANSWER = (
    "Available to start within 2 weeks of offer acceptance, or sooner if the "
    "project mobilization requires it."
)

COVER_LETTER_FIELD = ATSFieldSpec(
    field_id="cover_letter",
    label="Cover letter",
    type=FieldType.LONGTEXT,
    max_length=COVER_LETTER_MAX_LENGTH,
)


def is_screening_question(field: ATSFieldSpec) -> bool:
    """Return True for free-text fields phrased as an open question."""
    if field.type not in (FieldType.TEXT, FieldType.LONGTEXT):
        return False
    label = field.label.lower()
    return any(indicator in label for indicator in SCREENING_INDICATORS)


def find_relevant_excerpt(resume_text: str, keywords: list[str]) -> str:
    """Return up to three resume sentences with the most keyword hits.

    Sentences are ranked by how many keywords they contain; sentences with
    no hits are never quoted. Returns an empty string when nothing matches.
    """
    if not resume_text or not keywords:
        return ""

    sentences = [
        s.strip()
        for s in _SENTENCE_SPLIT_RE.split(resume_text)
        if len(s.strip()) > EXCERPT_MIN_SENTENCE_LENGTH
    ]
    scored = [(sum(1 for k in keywords if k in s.lower()), s) for s in sentences]
    scored.sort(key=lambda item: item[0], reverse=True)
    top = [s for hits, s in scored[:EXCERPT_MAX_SENTENCES] if hits > 0]
    if not top:
        return ""
    return ". ".join(top) + "."


def _years_phrase(years: int) -> str:
    return f"{years} year" if years == 1 else f"{years} years"


def _cert_list(profile: CandidateProfile, limit: int | None = None) -> str:
    certs = profile.certifications if limit is None else profile.certifications[:limit]
    return ", ".join(certs)


class RuleBasedAnswerGenerator:
    """Deterministic screening-answer generator built from text templates."""

    def generate_answer(
        self,
        profile: CandidateProfile,
        job: JobPosting,
        field: ATSFieldSpec,
    ) -> str:
        """Answer ``field`` for ``profile`` applying to ``job``."""
        label = field.label.lower()
        max_length = field.max_length or DEFAULT_ANSWER_MAX_LENGTH

        if "why" in label and any(t in label for t in _MOTIVATION_TARGETS):
            answer = self._motivation(profile, job)
        elif any(cue in label for cue in _EXPERIENCE_CUES):
            answer = self._experience(profile, job)
        elif any(cue in label for cue in _SALARY_CUES):
            answer = SALARY_ANSWER
        elif any(cue in label for cue in _START_CUES):
            answer = START_DATE_ANSWER
        elif any(cue in label for cue in _COVER_LETTER_CUES):
            answer = self.cover_letter(profile, job)
        else:
            answer = self._generic(profile)

        return truncate_words(answer, max_length)

    def cover_letter(self, profile: CandidateProfile, job: JobPosting) -> str:
        """Compose a short cover letter (untruncated)."""
        certs = _cert_list(profile, 4) or "OSHA and trade-specific credentials"
        summary = profile.summary or (
            "My career has been focused on delivering data center projects "
            "safely, on time and to spec."
        )
        travel = "available for travel assignments and " if profile.willing_to_travel else ""
        return (
            f"I'm writing to express my interest in the {job.title} position at {job.company}. "
            f"With {_years_phrase(profile.years_experience)} in mission-critical construction "
            f"and certifications including {certs}, I've built deep expertise in the kind "
            f"of work this role demands.\n\n"
            f"{summary}\n\n"
            f"I'm {travel}ready to bring my skills to your team. I'd welcome the "
            f"opportunity to discuss how my background fits your project needs."
        )

    def _motivation(self, profile: CandidateProfile, job: JobPosting) -> str:
        certs = _cert_list(profile, 3) or "relevant trades"
        return (
            f"With {_years_phrase(profile.years_experience)} in mission-critical "
            f"infrastructure and active certifications in {certs}, I'm looking to apply "
            f"my field experience to this {job.title} role. My background in data center "
            f"construction, from commissioning through turnover, lines up with the scope "
            f"described. I'm drawn to projects where uptime and reliability come first."
        )

    def _experience(self, profile: CandidateProfile, job: JobPosting) -> str:
        keywords = extract_keywords(f"{job.description} {job.requirements or ''}")
        excerpt = find_relevant_excerpt(profile.resume_text or "", keywords)
        if excerpt:
            return excerpt
        certs = _cert_list(profile) or "relevant industry certifications"
        return (
            f"I have {_years_phrase(profile.years_experience)} of hands-on experience in "
            f"data center environments, holding {certs}. My work has spanned hyperscale "
            f"new builds and retrofit projects, with a focus on safety, code compliance "
            f"and meeting aggressive commissioning timelines."
        )

    def _generic(self, profile: CandidateProfile) -> str:
        certs = _cert_list(profile, 3) or "relevant trades"
        summary = profile.summary or (
            "Experienced in mission-critical infrastructure from ground-up builds "
            "to commissioning."
        )
        return (
            f"{_years_phrase(profile.years_experience)} of data center construction "
            f"experience with certifications in {certs}. {summary}"
        )
