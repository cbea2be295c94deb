"""Candidate targeting: per-candidate scoring, ranking and estimates."""

from crew_ping_engine.scoring.candidate_scorer import score_candidate
from crew_ping_engine.scoring.ranking import (
    eligible_shortlist,
    estimate_match_count,
    rank_candidates,
)

__all__ = [
    "eligible_shortlist",
    "estimate_match_count",
    "rank_candidates",
    "score_candidate",
]
