"""Default application form layouts per ATS platform."""

from __future__ import annotations

from crew_ping_core.models.application import ATSFieldSpec, FieldType
from crew_ping_core.models.job import ATSPlatform

_YES_NO = ["Yes", "No"]

_COMMON_FIELDS: tuple[ATSFieldSpec, ...] = (
    ATSFieldSpec(field_id="first_name", label="First Name", required=True),
    ATSFieldSpec(field_id="last_name", label="Last Name", required=True),
    ATSFieldSpec(field_id="email", label="Email Address", required=True),
    ATSFieldSpec(field_id="phone", label="Phone Number", required=True),
    ATSFieldSpec(field_id="location", label="Location"),
)

_PLATFORM_FIELDS: dict[ATSPlatform, tuple[ATSFieldSpec, ...]] = {
    ATSPlatform.WORKDAY: (
        ATSFieldSpec(
            field_id="years_experience",
            label="Total Years of Experience",
            type=FieldType.NUMBER,
            required=True,
        ),
        ATSFieldSpec(
            field_id="certifications",
            label="Licenses & Certifications",
            type=FieldType.LONGTEXT,
        ),
        ATSFieldSpec(
            field_id="authorized_to_work",
            label="Are you authorized to work in the US?",
            type=FieldType.CHOICE,
            required=True,
            options=_YES_NO,
        ),
        ATSFieldSpec(
            field_id="willing_to_relocate",
            label="Willing to relocate?",
            type=FieldType.CHOICE,
            options=_YES_NO,
        ),
        ATSFieldSpec(
            field_id="q_why",
            label="Why are you interested in this role?",
            type=FieldType.LONGTEXT,
            max_length=500,
        ),
    ),
    ATSPlatform.GREENHOUSE: (
        ATSFieldSpec(field_id="resume", label="Resume", type=FieldType.FILE, required=True),
        ATSFieldSpec(
            field_id="cover_letter_field",
            label="Cover Letter",
            type=FieldType.LONGTEXT,
            max_length=1000,
        ),
        ATSFieldSpec(field_id="linkedin", label="LinkedIn URL"),
        ATSFieldSpec(
            field_id="q_experience",
            label="Describe your relevant experience",
            type=FieldType.LONGTEXT,
            max_length=500,
        ),
    ),
    ATSPlatform.LEVER: (
        ATSFieldSpec(field_id="current_title", label="Current Title"),
        ATSFieldSpec(field_id="resume", label="Resume", type=FieldType.FILE, required=True),
        ATSFieldSpec(
            field_id="q_why",
            label="Why do you want to work here?",
            type=FieldType.LONGTEXT,
            max_length=400,
        ),
        ATSFieldSpec(field_id="q_salary", label="Salary Expectations"),
        ATSFieldSpec(field_id="q_start", label="Available Start Date"),
    ),
    ATSPlatform.ICIMS: (
        ATSFieldSpec(
            field_id="years_experience",
            label="Years of Experience",
            type=FieldType.CHOICE,
            required=True,
            options=["0-1 years", "2-4 years", "5-7 years", "8-10 years", "10+ years"],
        ),
        ATSFieldSpec(field_id="certifications", label="Certifications", type=FieldType.LONGTEXT),
        ATSFieldSpec(
            field_id="q_experience",
            label="Tell us about your experience in this field",
            type=FieldType.LONGTEXT,
            max_length=600,
        ),
    ),
    ATSPlatform.GENERIC: (
        ATSFieldSpec(
            field_id="years_experience", label="Years of Experience", type=FieldType.NUMBER
        ),
        ATSFieldSpec(field_id="certifications", label="Certifications", type=FieldType.LONGTEXT),
        ATSFieldSpec(
            field_id="q_why",
            label="Why are you interested in this role?",
            type=FieldType.LONGTEXT,
            max_length=500,
        ),
        ATSFieldSpec(
            field_id="q_experience",
            label="Describe your relevant experience",
            type=FieldType.LONGTEXT,
            max_length=500,
        ),
    ),
}


def resolve_platform(tag: str | ATSPlatform | None) -> ATSPlatform:
    """Map a free-form platform tag to a known platform, defaulting to generic."""
    if isinstance(tag, ATSPlatform):
        return tag
    try:
        return ATSPlatform((tag or "").strip().lower())
    except ValueError:
        return ATSPlatform.GENERIC


def default_fields_for(platform: str | ATSPlatform | None) -> list[ATSFieldSpec]:
    """Return the known form fields for a platform (generic when unrecognized)."""
    resolved = resolve_platform(platform)
    return [*_COMMON_FIELDS, *_PLATFORM_FIELDS[resolved]]
