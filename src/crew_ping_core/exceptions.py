"""Custom exception hierarchy for crew-ping."""

from __future__ import annotations


class CrewPingError(Exception):
    """Base exception for all crew-ping errors."""


class InvalidCampaignError(CrewPingError):
    """Raised when a ping campaign request is incomplete or inconsistent."""


class UnknownAnswerGeneratorError(CrewPingError):
    """Raised when settings name an answer generator that is not registered."""
