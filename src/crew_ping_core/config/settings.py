"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from crew_ping_core.constants import DEFAULT_COST_PER_PING


class Settings(BaseSettings):
    """Central configuration for crew-ping."""

    model_config = SettingsConfigDict(env_prefix="CP_", env_file=".env", extra="ignore")

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for collectors",
    )

    # --- Application drafting ---
    answer_generator: str = Field(
        default="rules",
        description="Screening-answer generator backend ('rules' is deterministic)",
    )

    # --- Targeting ---
    default_radius_miles: float = Field(
        default=100.0,
        ge=0,
        description="Search radius used when criteria omit one",
    )
    shortlist_limit: int = Field(
        default=50,
        gt=0,
        description="Maximum eligible candidates listed in full ranking output",
    )

    # --- Campaigns ---
    cost_per_ping: float = Field(
        default=DEFAULT_COST_PER_PING,
        ge=0,
        description="Cost of one SMS notification in USD",
    )
    campaign_link_base: str = Field(
        default="dcjobs.co",
        description="Host used to build short campaign links",
    )
