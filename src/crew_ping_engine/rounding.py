"""Rounding shared by the targeting and job-fit scores."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))
