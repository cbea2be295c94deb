"""Ping campaign planning."""

from crew_ping_engine.campaign.planner import personalize_message, plan_campaign

__all__ = ["personalize_message", "plan_campaign"]
