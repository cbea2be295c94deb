"""Job posting models consumed by the application drafting pipeline."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ATSPlatform(StrEnum):
    """Applicant Tracking System platforms with known form layouts."""

    WORKDAY = "workday"
    GREENHOUSE = "greenhouse"
    LEVER = "lever"
    ICIMS = "icims"
    GENERIC = "generic"


class JobPosting(BaseModel):
    """The subset of a job posting needed to draft an application."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Job identifier")
    title: str = Field(description="Job title")
    company: str = Field(description="Hiring company name")
    description: str = Field(default="", description="Job description text")
    requirements: str | None = Field(default=None, description="Requirements text")
    cert_required: str | None = Field(
        default=None, description="Comma-separated required certifications"
    )
    ats_type: str | None = Field(default=None, description="Target ATS platform tag")
    category: str = Field(default="", description="Trade category, e.g. 'electrical'")

    @property
    def required_certs(self) -> list[str]:
        """Required certifications parsed from ``cert_required``."""
        if not self.cert_required:
            return []
        return [c.strip() for c in self.cert_required.split(",") if c.strip()]
