"""Ping campaign planning models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PingRecipient(BaseModel):
    """One personalized notification queued for an eligible candidate."""

    model_config = ConfigDict(frozen=True)

    profile_id: str = Field(description="Recipient profile identifier")
    name: str = Field(description="Recipient full name")
    phone: str = Field(description="Recipient phone number")
    score: int = Field(ge=0, le=100, description="Targeting score at planning time")
    message: str = Field(description="Personalized message body")


class CampaignPlan(BaseModel):
    """Recipients and cost estimate for a ping campaign; nothing is sent."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Campaign name")
    recipients: list[PingRecipient] = Field(description="Eligible recipients in rank order")
    cost_per_ping: float = Field(ge=0, description="Cost of one notification (USD)")
    drip_steps: int = Field(ge=0, description="Follow-up messages per recipient")
    estimated_total_cost: float = Field(ge=0, description="Projected campaign cost (USD)")
    top_candidates: list[PingRecipient] = Field(description="Highest-ranked recipients")
