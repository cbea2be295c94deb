"""Structured logging configuration using structlog.

Every entry carries ``service="crew-ping"``. Work scoped to one campaign or
one job posting runs inside ``log_context`` so that engine events such as
``candidates_ranked`` or ``application_draft_generated`` can be traced back to
the campaign name or job id without threading them through every call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import structlog
from structlog.contextvars import bound_contextvars, merge_contextvars

if TYPE_CHECKING:
    from crew_ping_core.config.settings import Settings

SERVICE_NAME = "crew-ping"


def configure_logging(settings: Settings) -> None:
    """Configure structlog with JSON or console rendering.

    Sets up shared processors, routes stdlib logging through structlog,
    and configures the output format based on settings.
    """
    shared_processors: list[structlog.types.Processor] = [
        merge_contextvars,
        _add_service,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(_resolve_level(settings.log_level))


@contextmanager
def log_context(*, campaign: str | None = None, job_id: str | None = None) -> Iterator[None]:
    """Tag log entries emitted inside the block with a campaign and/or job id.

    ``campaign`` is the ping campaign name and ``job_id`` the job posting
    being drafted against. ``None`` values are not bound, and any values bound
    by an enclosing block are restored on exit.
    """
    values = {
        key: value
        for key, value in (("campaign", campaign), ("job_id", job_id))
        if value is not None
    }
    with bound_contextvars(**values):
        yield


def _add_service(
    _logger: object, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Stamp the service name on every entry."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _resolve_level(level_name: str) -> int:
    """Convert a level name string to a logging level int."""
    mapping: dict[str, int] = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(level_name.upper(), logging.INFO)
