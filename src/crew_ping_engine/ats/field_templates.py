"""Deterministic mapping of profile data onto ATS form fields.

Labels are normalized to snake_case tokens and looked up in
``STANDARD_FIELD_EXTRACTORS``: an exact token hit first, then a containment
hit in either direction. Choice fields that still have no answer fall back
to range/yes-no inference against their options. Authorization questions
are never answered on the candidate's behalf.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from crew_ping_core.constants import (
    CHOICE_INFERENCE_CONFIDENCE,
    EXACT_TEMPLATE_CONFIDENCE,
    EXACT_TEMPLATE_EMPTY_CONFIDENCE,
    FUZZY_TEMPLATE_CONFIDENCE,
    FUZZY_TEMPLATE_EMPTY_CONFIDENCE,
)
from crew_ping_core.models.application import AnswerSource, ATSFieldSpec, FieldAnswer, FieldType
from crew_ping_core.models.candidate import CandidateProfile
from crew_ping_engine.ats.screening import is_screening_question
from crew_ping_engine.text.normalize import normalize_field_label

Extractor = Callable[[CandidateProfile], str]

_RANGE_RE = re.compile(r"(\d+)\s*[-–]\s*(\d+)")
_OPEN_RANGE_RE = re.compile(r"(\d+)\s*\+")


def _first_name(profile: CandidateProfile) -> str:
    parts = profile.name.split()
    return parts[0] if parts else ""


def _last_name(profile: CandidateProfile) -> str:
    return " ".join(profile.name.split()[1:])


def _location_part(index: int) -> Extractor:
    def extract(profile: CandidateProfile) -> str:
        parts = (profile.location or "").split(",")
        return parts[index].strip() if len(parts) > index else ""

    return extract


def _certifications(profile: CandidateProfile) -> str:
    return ", ".join(profile.certifications)


def _travel(profile: CandidateProfile) -> str:
    return "Yes" if profile.willing_to_travel else "No"


def _blank(_profile: CandidateProfile) -> str:
    return ""


# Insertion order matters: the first containment hit wins.
STANDARD_FIELD_EXTRACTORS: dict[str, Extractor] = {
    # Name
    "full_name": lambda p: p.name,
    "first_name": _first_name,
    "last_name": _last_name,
    "name": lambda p: p.name,
    # Contact
    "email": lambda p: p.email,
    "email_address": lambda p: p.email,
    "phone": lambda p: p.phone or "",
    "phone_number": lambda p: p.phone or "",
    "mobile": lambda p: p.phone or "",
    # Location
    "location": lambda p: p.location or "",
    "city": _location_part(0),
    "state": _location_part(1),
    "address": lambda p: p.location or "",
    "zip": _blank,
    "zip_code": _blank,
    # Experience
    "years_experience": lambda p: str(p.years_experience),
    "experience": lambda p: str(p.years_experience),
    "total_experience": lambda p: f"{p.years_experience} years",
    # Professional
    "headline": lambda p: p.headline or "",
    "title": lambda p: p.headline or "",
    "current_title": lambda p: p.headline or "",
    "summary": lambda p: p.summary or "",
    "linkedin": _blank,
    "website": _blank,
    "portfolio": _blank,
    # Certifications
    "certifications": _certifications,
    "licenses": _certifications,
    "credentials": _certifications,
    # Travel / relocation
    "willing_to_travel": _travel,
    "willing_to_relocate": _travel,
    "relocation": _travel,
    # Authorization: the candidate must answer these personally
    "authorized_to_work": _blank,
    "work_authorization": _blank,
    "us_citizen": _blank,
    "citizenship": _blank,
    "requires_sponsorship": _blank,
    "sponsorship": _blank,
}


def _lookup(token: str, *, allow_fuzzy: bool) -> tuple[Extractor, bool] | None:
    """Find the extractor for a label token; the flag is True for exact hits."""
    extractor = STANDARD_FIELD_EXTRACTORS.get(token)
    if extractor is not None:
        return extractor, True
    if not allow_fuzzy or not token:
        return None
    for pattern, candidate in STANDARD_FIELD_EXTRACTORS.items():
        if pattern in token or token in pattern:
            return candidate, False
    return None


def _option_for(value: str, options: list[str]) -> str | None:
    """Return the option spelled like ``value`` (case-insensitive), if any."""
    wanted = value.strip().lower()
    if not wanted:
        return None
    for option in options:
        if option.strip().lower() == wanted:
            return option
    return None


def _option_contains_years(option: str, years: int) -> bool:
    match = _RANGE_RE.search(option)
    if match:
        return int(match.group(1)) <= years <= int(match.group(2))
    open_match = _OPEN_RANGE_RE.search(option)
    if open_match:
        return years >= int(open_match.group(1))
    return False


def match_choice_option(field: ATSFieldSpec, profile: CandidateProfile) -> FieldAnswer | None:
    """Infer a choice answer from experience ranges or travel yes/no options."""
    label = field.label.lower()
    options = field.options or []

    if "experience" in label or "years" in label:
        for option in options:
            if _option_contains_years(option, profile.years_experience):
                return FieldAnswer(
                    field_id=field.field_id,
                    value=option,
                    source=AnswerSource.TEMPLATE,
                    confidence=CHOICE_INFERENCE_CONFIDENCE,
                )

    if "travel" in label or "relocat" in label:
        option = _option_for(_travel(profile), options)
        if option is not None:
            return FieldAnswer(
                field_id=field.field_id,
                value=option,
                source=AnswerSource.TEMPLATE,
                confidence=CHOICE_INFERENCE_CONFIDENCE,
            )

    return None


def try_template_match(field: ATSFieldSpec, profile: CandidateProfile) -> FieldAnswer | None:
    """Resolve a field from profile data alone, or return None.

    Containment matching is skipped for screening questions so that a
    prompt like "Describe your relevant experience" is not answered with a
    bare number. Choice fields only accept values that are one of their
    options.
    """
    token = normalize_field_label(field.label)
    is_choice = field.type is FieldType.CHOICE and bool(field.options)
    hit = _lookup(token, allow_fuzzy=not is_screening_question(field))

    if hit is not None:
        extractor, exact = hit
        value = extractor(profile)
        if is_choice:
            option = _option_for(value, field.options or [])
            if option is not None:
                confidence = EXACT_TEMPLATE_CONFIDENCE if exact else FUZZY_TEMPLATE_CONFIDENCE
                return FieldAnswer(
                    field_id=field.field_id,
                    value=option,
                    source=AnswerSource.TEMPLATE,
                    confidence=confidence,
                )
        else:
            if exact:
                confidence = EXACT_TEMPLATE_CONFIDENCE if value else EXACT_TEMPLATE_EMPTY_CONFIDENCE
            else:
                confidence = FUZZY_TEMPLATE_CONFIDENCE if value else FUZZY_TEMPLATE_EMPTY_CONFIDENCE
            return FieldAnswer(
                field_id=field.field_id,
                value=value,
                source=AnswerSource.TEMPLATE,
                confidence=confidence,
            )

    if is_choice:
        return match_choice_option(field, profile)
    return None
