"""Batch ranking and match-count estimation for ping targeting."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

import structlog

from crew_ping_core.constants import TOP_TIER_SCORE
from crew_ping_core.interfaces.clock import utc_now
from crew_ping_core.models.candidate import CandidateRecord
from crew_ping_core.models.targeting import MatchEstimate, ScoredCandidate, TargetingCriteria
from crew_ping_engine.scoring.candidate_scorer import score_candidate

logger = structlog.get_logger()


def rank_candidates(
    candidates: Iterable[CandidateRecord],
    criteria: TargetingCriteria,
    *,
    now: datetime | None = None,
) -> list[ScoredCandidate]:
    """Score every candidate and sort eligible first, then by score descending.

    Ineligible candidates are kept (at the end) so callers can explain why
    they were left out. Ties keep input order.
    """
    now = now or utc_now()
    scored = [score_candidate(c, criteria, now=now) for c in candidates]
    scored.sort(key=lambda s: (not s.eligible, -s.score))

    logger.debug(
        "candidates_ranked",
        total=len(scored),
        eligible=sum(1 for s in scored if s.eligible),
        required_certs=len(criteria.required_certs),
    )
    return scored


def estimate_match_count(
    candidates: Iterable[CandidateRecord],
    criteria: TargetingCriteria,
    *,
    now: datetime | None = None,
) -> MatchEstimate:
    """Count total, eligible and top-tier candidates for the targeting preview."""
    ranked = rank_candidates(candidates, criteria, now=now)
    eligible = [s for s in ranked if s.eligible]
    return MatchEstimate(
        total=len(ranked),
        eligible=len(eligible),
        top_tier=sum(1 for s in eligible if s.score >= TOP_TIER_SCORE),
    )


def eligible_shortlist(ranked: list[ScoredCandidate], limit: int) -> list[ScoredCandidate]:
    """Return the first ``limit`` eligible candidates of a ranked list."""
    if limit < 0:
        msg = f"limit must be non-negative, got {limit}"
        raise ValueError(msg)
    return [s for s in ranked if s.eligible][:limit]
