"""Candidate records used for ping targeting and application drafting."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CandidateRecord(BaseModel):
    """A job seeker as seen by the ping targeting engine.

    Sourced from the persistence layer (with coordinates resolved upstream)
    and treated as read-only.
    """

    model_config = ConfigDict(frozen=True)

    profile_id: str = Field(description="Job seeker profile identifier")
    user_id: str = Field(description="Owning user account identifier")
    name: str = Field(description="Full name")
    phone: str | None = Field(default=None, description="Mobile number for SMS pings")
    email: str = Field(default="", description="Contact email address")
    location: str | None = Field(default=None, description="Location label, e.g. 'Houston, TX'")
    latitude: float | None = Field(default=None, ge=-90, le=90, description="Latitude")
    longitude: float | None = Field(default=None, ge=-180, le=180, description="Longitude")
    years_experience: int = Field(default=0, ge=0, description="Years of trade experience")
    willing_to_travel: bool = Field(default=False, description="Open to traveling crews")
    sms_opt_in: bool = Field(
        default=False, description="Explicit SMS consent; never inferred"
    )
    certifications: list[str] = Field(
        default_factory=list, description="Certification names as entered"
    )
    last_active: datetime | None = Field(
        default=None, description="Last profile update or login"
    )

    @property
    def has_coordinates(self) -> bool:
        """Whether both latitude and longitude are known."""
        return self.latitude is not None and self.longitude is not None


class CandidateProfile(BaseModel):
    """Identity and skills data used to fill out ATS applications."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Full name")
    email: str = Field(default="", description="Contact email address")
    phone: str | None = Field(default=None, description="Phone number")
    location: str | None = Field(default=None, description="Location label")
    resume_text: str | None = Field(default=None, description="Free-text resume body")
    years_experience: int = Field(default=0, ge=0, description="Years of experience")
    certifications: list[str] = Field(default_factory=list, description="Held certifications")
    skills: list[str] = Field(default_factory=list, description="Listed skills")
    willing_to_travel: bool = Field(default=False, description="Open to travel or relocation")
    headline: str | None = Field(default=None, description="Profile headline / current title")
    summary: str | None = Field(default=None, description="Short professional summary")
