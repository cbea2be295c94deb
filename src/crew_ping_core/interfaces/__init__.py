"""Public interface re-exports for crew_ping_core."""

from crew_ping_core.interfaces.answer_generator import ScreeningAnswerGenerator
from crew_ping_core.interfaces.clock import Clock, as_utc, utc_now

__all__ = [
    "Clock",
    "ScreeningAnswerGenerator",
    "as_utc",
    "utc_now",
]
