"""Job-fit match score for an application draft.

Not to be confused with the ping targeting score in
``crew_ping_engine.scoring``: this one rates how well a profile fits a job
posting, with its own inputs and weights.
"""

from __future__ import annotations

from crew_ping_core.constants import (
    MATCH_EXPERIENCE_SATURATION_YEARS,
    MATCH_NO_CERT_REQUIREMENT_CREDIT,
    MATCH_NO_TRAVEL_CREDIT,
    MATCH_WEIGHTS,
)
from crew_ping_core.models.candidate import CandidateProfile
from crew_ping_engine.rounding import round_half_up
from crew_ping_engine.text.normalize import extract_keywords, holds_cert


def compute_match_score(
    profile: CandidateProfile,
    required_certs: list[str],
    description: str,
    category: str = "",
) -> int:
    """Rate profile-to-job fit from 0 to 100.

    Args:
        profile: The applying candidate.
        required_certs: Certifications the posting requires.
        description: Job description text.
        category: Trade category; does not affect the score.

    Returns:
        Integer score: certs 40, experience 25, keyword overlap 20, travel 15.
    """
    score = 0.0

    required = [c for c in required_certs if c.strip()]
    if required:
        matched = sum(1 for req in required if holds_cert(profile.certifications, req))
        score += matched / len(required) * MATCH_WEIGHTS["certs"]
    else:
        score += MATCH_WEIGHTS["certs"] * MATCH_NO_CERT_REQUIREMENT_CREDIT

    experience_ratio = min(profile.years_experience / MATCH_EXPERIENCE_SATURATION_YEARS, 1.0)
    score += experience_ratio * MATCH_WEIGHTS["experience"]

    job_keywords = extract_keywords(description)
    if job_keywords:
        profile_keywords = set(
            extract_keywords(
                " ".join(
                    [
                        profile.resume_text or "",
                        " ".join(profile.certifications),
                        " ".join(profile.skills),
                    ]
                )
            )
        )
        overlap = sum(1 for k in job_keywords if k in profile_keywords)
        coverage = min(overlap / max(len(job_keywords) * 0.5, 1), 1.0)
        score += coverage * MATCH_WEIGHTS["keywords"]

    if profile.willing_to_travel:
        score += MATCH_WEIGHTS["travel"]
    else:
        score += MATCH_WEIGHTS["travel"] * MATCH_NO_TRAVEL_CREDIT

    return round_half_up(min(score, 100.0))
