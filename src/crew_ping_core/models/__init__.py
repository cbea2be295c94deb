"""Domain models for crew-ping."""

from crew_ping_core.models.application import (
    AnswerSource,
    ApplicationDraft,
    ATSFieldSpec,
    FieldAnswer,
    FieldType,
)
from crew_ping_core.models.campaign import CampaignPlan, PingRecipient
from crew_ping_core.models.candidate import CandidateProfile, CandidateRecord
from crew_ping_core.models.job import ATSPlatform, JobPosting
from crew_ping_core.models.targeting import (
    MatchEstimate,
    ScoreBreakdown,
    ScoredCandidate,
    TargetingCriteria,
)

__all__ = [
    "ATSFieldSpec",
    "ATSPlatform",
    "AnswerSource",
    "ApplicationDraft",
    "CampaignPlan",
    "CandidateProfile",
    "CandidateRecord",
    "FieldAnswer",
    "FieldType",
    "JobPosting",
    "MatchEstimate",
    "PingRecipient",
    "ScoreBreakdown",
    "ScoredCandidate",
    "TargetingCriteria",
]
