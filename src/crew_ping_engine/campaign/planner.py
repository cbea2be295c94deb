"""Turn a ranked candidate list into a costed ping campaign plan."""

from __future__ import annotations

import structlog

from crew_ping_core.constants import CAMPAIGN_TOP_CANDIDATES, DEFAULT_COST_PER_PING
from crew_ping_core.exceptions import InvalidCampaignError
from crew_ping_core.models.campaign import CampaignPlan, PingRecipient
from crew_ping_core.models.targeting import ScoredCandidate

logger = structlog.get_logger()


def personalize_message(template: str, name: str, link: str = "") -> str:
    """Fill ``{{name}}`` with the first name and ``{{link}}`` with the campaign link."""
    parts = name.split()
    first_name = parts[0] if parts else name
    return template.replace("{{name}}", first_name).replace("{{link}}", link)


def plan_campaign(
    ranked: list[ScoredCandidate],
    *,
    name: str,
    message: str,
    drip_steps: int = 0,
    cost_per_ping: float = DEFAULT_COST_PER_PING,
    link: str = "",
) -> CampaignPlan:
    """Build a campaign plan from ranked candidates.

    Only eligible candidates become recipients, in the order given. Each
    drip step adds one more message per recipient to the cost estimate.

    Raises:
        InvalidCampaignError: On a blank name or message, or negative
            drip steps or cost.
    """
    if not name.strip():
        msg = "Campaign name is required"
        raise InvalidCampaignError(msg)
    if not message.strip():
        msg = "Campaign message is required"
        raise InvalidCampaignError(msg)
    if drip_steps < 0:
        msg = f"drip_steps must be >= 0, got {drip_steps}"
        raise InvalidCampaignError(msg)
    if cost_per_ping < 0:
        msg = f"cost_per_ping must be >= 0, got {cost_per_ping}"
        raise InvalidCampaignError(msg)

    recipients = [
        PingRecipient(
            profile_id=scored.candidate.profile_id,
            name=scored.candidate.name,
            phone=(scored.candidate.phone or "").strip(),
            score=scored.score,
            message=personalize_message(message, scored.candidate.name, link),
        )
        for scored in ranked
        if scored.eligible
    ]
    total_cost = round(len(recipients) * cost_per_ping * (1 + drip_steps), 2)

    plan = CampaignPlan(
        name=name.strip(),
        recipients=recipients,
        cost_per_ping=cost_per_ping,
        drip_steps=drip_steps,
        estimated_total_cost=total_cost,
        top_candidates=recipients[:CAMPAIGN_TOP_CANDIDATES],
    )
    logger.info(
        "campaign_planned",
        campaign=plan.name,
        recipients=len(recipients),
        skipped=len(ranked) - len(recipients),
        estimated_total_cost=total_cost,
    )
    return plan
