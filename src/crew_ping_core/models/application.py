"""ATS field specs, answers and application drafts."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from crew_ping_core.models.job import ATSPlatform


class FieldType(StrEnum):
    """Value types an ATS form field can take."""

    TEXT = "text"
    LONGTEXT = "longtext"
    CHOICE = "choice"
    CHECKBOX = "checkbox"
    DATE = "date"
    NUMBER = "number"
    FILE = "file"


class AnswerSource(StrEnum):
    """Where a field answer came from."""

    TEMPLATE = "template"
    SYNTHESIZED = "synthesized"


class ATSFieldSpec(BaseModel):
    """A single form field exposed by an ATS platform."""

    model_config = ConfigDict(frozen=True)

    field_id: str = Field(description="Platform field identifier")
    label: str = Field(description="Human-readable label shown on the form")
    type: FieldType = Field(default=FieldType.TEXT, description="Value type")
    required: bool = Field(default=False, description="Whether the form requires a value")
    options: list[str] | None = Field(default=None, description="Enumerated choices")
    max_length: int | None = Field(default=None, gt=0, description="Maximum value length")


class FieldAnswer(BaseModel):
    """A produced value for one ATS field."""

    model_config = ConfigDict(frozen=True)

    field_id: str = Field(description="Field this answer fills")
    value: str = Field(description="Produced value; empty when unresolved")
    source: AnswerSource = Field(description="Template-derived or synthesized")
    confidence: float = Field(ge=0.0, le=1.0, description="Confidence the value is correct")


class ApplicationDraft(BaseModel):
    """A complete application draft awaiting human approval."""

    model_config = ConfigDict(frozen=True)

    job_id: str = Field(description="Job this draft applies to")
    job_title: str = Field(description="Job title (denormalized)")
    company: str = Field(description="Company name (denormalized)")
    ats_platform: ATSPlatform = Field(description="Resolved ATS platform")
    fields: list[FieldAnswer] = Field(description="Answers in form order")
    cover_letter: str = Field(description="Synthesized cover letter")
    match_score: int = Field(ge=0, le=100, description="Job-fit match score 0-100")
    warnings: list[str] = Field(default_factory=list, description="Items to review")
    generated_at: datetime = Field(description="When the draft was generated")

    def answer_for(self, field_id: str) -> FieldAnswer | None:
        """Return the answer for ``field_id``, if one was produced."""
        for answer in self.fields:
            if answer.field_id == field_id:
                return answer
        return None
