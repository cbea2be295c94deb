"""Candidate scoring for SMS ping targeting.

Each candidate gets five independent sub-scores against the employer's
criteria, plus a hard eligibility gate:

    certifications   0-40   safety/compliance credentials, fuzzy matched
    proximity        0-25   Haversine step curve, label fallback
    experience       0-20   logarithmic, partial credit below the minimum
    freshness        0-10   recency of profile activity
    travel bonus     0-5    compensates for distance only

Eligibility requires explicit SMS consent, a phone number on file and a
total of at least ``MIN_ELIGIBLE_SCORE``.
"""

from __future__ import annotations

import math
from datetime import datetime

from crew_ping_core.constants import (
    BELOW_MIN_EXPERIENCE_CREDIT,
    DISQUALIFY_NO_PHONE,
    DISQUALIFY_NO_SMS_CONSENT,
    EXACT_LOCATION_CREDIT,
    EXPERIENCE_SATURATION_YEARS,
    FRESHNESS_STEPS,
    MAX_TOTAL_SCORE,
    MIN_ELIGIBLE_SCORE,
    NO_CERT_REQUIREMENT_CREDIT,
    PARTIAL_CERT_PENALTY,
    PARTIAL_LOCATION_CREDIT,
    PROXIMITY_STEPS,
    SAME_STATE_CREDIT,
    TARGETING_WEIGHTS,
    UNKNOWN_LOCATION_CREDIT,
    WITHIN_RADIUS_CREDIT,
)
from crew_ping_core.interfaces.clock import as_utc, utc_now
from crew_ping_core.models.candidate import CandidateRecord
from crew_ping_core.models.targeting import ScoreBreakdown, ScoredCandidate, TargetingCriteria
from crew_ping_engine.geo.distance import haversine_miles
from crew_ping_engine.geo.locations import extract_state
from crew_ping_engine.rounding import round_half_up
from crew_ping_engine.text.normalize import match_normalized_certs, normalize_cert

_SECONDS_PER_DAY = 86400


def score_certifications(candidate_certs: list[str], required_certs: list[str]) -> float:
    """Score certification coverage (0-40).

    Full coverage earns every point. Partial coverage is scaled below linear
    so that fully-qualified candidates rank ahead of near misses.
    """
    max_points = TARGETING_WEIGHTS["certs"]
    required = list(dict.fromkeys(c for c in map(normalize_cert, required_certs) if c))
    if not required:
        return max_points * NO_CERT_REQUIREMENT_CREDIT

    held = [c for c in map(normalize_cert, candidate_certs) if c]
    matched = sum(1 for req in required if any(match_normalized_certs(c, req) for c in held))
    ratio = matched / len(required)
    if ratio == 1.0:
        return max_points
    return round_half_up(ratio * max_points * PARTIAL_CERT_PENALTY)


def score_proximity(candidate: CandidateRecord, criteria: TargetingCriteria) -> float:
    """Score proximity to the target site (0-25).

    Uses coordinates when both sides have them; otherwise compares location
    labels. Unknown locations get a flat partial credit.
    """
    max_points = TARGETING_WEIGHTS["proximity"]

    if candidate.has_coordinates and criteria.has_coordinates:
        distance = haversine_miles(
            candidate.latitude,  # type: ignore[arg-type]
            candidate.longitude,  # type: ignore[arg-type]
            criteria.latitude,  # type: ignore[arg-type]
            criteria.longitude,  # type: ignore[arg-type]
        )
        for limit, credit in PROXIMITY_STEPS:
            if distance <= limit:
                return max_points * credit
        if distance <= criteria.radius_miles:
            return max_points * WITHIN_RADIUS_CREDIT
        return 0.0

    cand_loc = (candidate.location or "").lower().strip()
    target_loc = (criteria.location or "").lower().strip()
    if cand_loc and target_loc:
        if cand_loc == target_loc:
            return max_points * EXACT_LOCATION_CREDIT
        if cand_loc in target_loc or target_loc in cand_loc:
            return max_points * PARTIAL_LOCATION_CREDIT
        cand_state = extract_state(cand_loc)
        if cand_state and cand_state == extract_state(target_loc):
            return max_points * SAME_STATE_CREDIT

    # TODO: distinguish "no location data" from "known but unmatched" once
    # geocoding covers candidate labels outside the known market cities.
    return max_points * UNKNOWN_LOCATION_CREDIT


def score_experience(years_experience: int, min_required: int) -> float:
    """Score experience with diminishing returns (0-20).

    Below the minimum the candidate keeps proportional partial credit; at or
    above it, ln(years + 1) / ln(16) saturates around 15 years.
    """
    max_points = TARGETING_WEIGHTS["experience"]
    if years_experience < min_required:
        ratio = years_experience / max(min_required, 1)
        return ratio * max_points * BELOW_MIN_EXPERIENCE_CREDIT

    normalized = math.log(years_experience + 1) / math.log(EXPERIENCE_SATURATION_YEARS + 1)
    return min(normalized, 1.0) * max_points


def score_freshness(last_active: datetime | None, now: datetime) -> float:
    """Score recency of profile activity (0-10); unknown activity scores 0."""
    if last_active is None:
        return 0.0
    elapsed = (as_utc(now) - as_utc(last_active)).total_seconds()
    days_since = math.floor(elapsed / _SECONDS_PER_DAY)
    for limit, credit in FRESHNESS_STEPS:
        if days_since < limit:
            return TARGETING_WEIGHTS["freshness"] * credit
    return 0.0


def score_travel_bonus(willing_to_travel: bool, proximity_score: float) -> float:
    """Score travel willingness in proportion to the proximity points missed (0-5)."""
    if not willing_to_travel:
        return 0.0
    distance_penalty = 1 - proximity_score / TARGETING_WEIGHTS["proximity"]
    return TARGETING_WEIGHTS["travel_bonus"] * max(distance_penalty, 0.0)


def apply_hard_filters(candidate: CandidateRecord) -> list[str]:
    """Return the reasons a candidate cannot be pinged at all."""
    reasons: list[str] = []
    if not candidate.sms_opt_in:
        reasons.append(DISQUALIFY_NO_SMS_CONSENT)
    if not (candidate.phone or "").strip():
        reasons.append(DISQUALIFY_NO_PHONE)
    return reasons


def score_candidate(
    candidate: CandidateRecord,
    criteria: TargetingCriteria,
    *,
    now: datetime | None = None,
) -> ScoredCandidate:
    """Score a single candidate against targeting criteria."""
    now = now or utc_now()
    disqualify_reasons = apply_hard_filters(candidate)

    proximity = score_proximity(candidate, criteria)
    cert_score = round_half_up(
        score_certifications(candidate.certifications, criteria.required_certs)
    )
    proximity_score = round_half_up(proximity)
    experience_score = round_half_up(
        score_experience(candidate.years_experience, criteria.min_experience)
    )
    freshness_score = round_half_up(score_freshness(candidate.last_active, now))
    travel_bonus = round_half_up(score_travel_bonus(candidate.willing_to_travel, proximity))

    total = min(
        cert_score + proximity_score + experience_score + freshness_score + travel_bonus,
        MAX_TOTAL_SCORE,
    )
    breakdown = ScoreBreakdown(
        cert_score=cert_score,
        proximity_score=proximity_score,
        experience_score=experience_score,
        freshness_score=freshness_score,
        travel_bonus=travel_bonus,
        total=total,
    )
    return ScoredCandidate(
        candidate=candidate,
        breakdown=breakdown,
        eligible=not disqualify_reasons and total >= MIN_ELIGIBLE_SCORE,
        disqualify_reasons=disqualify_reasons,
    )
