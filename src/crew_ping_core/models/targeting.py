"""Targeting criteria and scoring results for ping campaigns."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from crew_ping_core.constants import MAX_TOTAL_SCORE, TARGETING_WEIGHTS
from crew_ping_core.models.candidate import CandidateRecord


class TargetingCriteria(BaseModel):
    """An employer's targeting criteria for one scoring pass."""

    model_config = ConfigDict(frozen=True)

    required_certs: list[str] = Field(
        default_factory=list, description="Required certifications; empty means none"
    )
    location: str | None = Field(default=None, description="Target location label")
    latitude: float | None = Field(default=None, ge=-90, le=90, description="Target latitude")
    longitude: float | None = Field(
        default=None, ge=-180, le=180, description="Target longitude"
    )
    radius_miles: float = Field(default=100.0, ge=0, description="Search radius in miles")
    min_experience: int = Field(default=0, ge=0, description="Minimum years of experience")

    @property
    def has_coordinates(self) -> bool:
        """Whether both latitude and longitude are known."""
        return self.latitude is not None and self.longitude is not None


class ScoreBreakdown(BaseModel):
    """The five targeting sub-scores and their capped sum."""

    model_config = ConfigDict(frozen=True)

    cert_score: int = Field(ge=0, le=TARGETING_WEIGHTS["certs"], description="0-40")
    proximity_score: int = Field(ge=0, le=TARGETING_WEIGHTS["proximity"], description="0-25")
    experience_score: int = Field(ge=0, le=TARGETING_WEIGHTS["experience"], description="0-20")
    freshness_score: int = Field(ge=0, le=TARGETING_WEIGHTS["freshness"], description="0-10")
    travel_bonus: int = Field(ge=0, le=TARGETING_WEIGHTS["travel_bonus"], description="0-5")
    total: int = Field(ge=0, le=MAX_TOTAL_SCORE, description="Capped sum of sub-scores")

    @model_validator(mode="after")
    def validate_total(self) -> ScoreBreakdown:
        """Ensure total equals the capped sum of the components."""
        expected = min(
            self.cert_score
            + self.proximity_score
            + self.experience_score
            + self.freshness_score
            + self.travel_bonus,
            MAX_TOTAL_SCORE,
        )
        if self.total != expected:
            msg = f"total {self.total} does not match capped component sum {expected}"
            raise ValueError(msg)
        return self


class ScoredCandidate(BaseModel):
    """A candidate with its targeting score and eligibility verdict."""

    model_config = ConfigDict(frozen=True)

    candidate: CandidateRecord = Field(description="The scored candidate")
    breakdown: ScoreBreakdown = Field(description="Per-signal score breakdown")
    eligible: bool = Field(description="Passes hard filters and the score floor")
    disqualify_reasons: list[str] = Field(
        default_factory=list, description="Why the candidate failed the hard filters"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> int:
        """Composite 0-100 targeting score."""
        return self.breakdown.total

    @model_validator(mode="after")
    def validate_eligibility(self) -> ScoredCandidate:
        """An eligible candidate cannot carry disqualification reasons."""
        if self.eligible and self.disqualify_reasons:
            msg = "eligible candidate cannot have disqualify_reasons"
            raise ValueError(msg)
        return self


class MatchEstimate(BaseModel):
    """Summary counts shown while an employer edits targeting criteria."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(ge=0, description="Number of candidates considered")
    eligible: int = Field(ge=0, description="Candidates passing eligibility")
    top_tier: int = Field(ge=0, description="Eligible candidates scoring 70 or more")
