"""Observability: structured logging."""

from crew_ping_engine.observability.logging import (
    configure_logging,
    log_context,
)

__all__ = [
    "configure_logging",
    "log_context",
]
