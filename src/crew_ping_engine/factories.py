"""Factory functions for creating engine components from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from crew_ping_core.exceptions import UnknownAnswerGeneratorError
from crew_ping_core.interfaces.answer_generator import ScreeningAnswerGenerator
from crew_ping_engine.ats.screening import RuleBasedAnswerGenerator

if TYPE_CHECKING:
    from crew_ping_core.config.settings import Settings

ANSWER_GENERATORS: dict[str, type[ScreeningAnswerGenerator]] = {
    "rules": RuleBasedAnswerGenerator,
}


def create_answer_generator(settings: Settings) -> ScreeningAnswerGenerator:
    """Create the screening-answer generator named by ``settings.answer_generator``.

    Raises:
        UnknownAnswerGeneratorError: If the name is not registered.
    """
    name = settings.answer_generator.strip().lower()
    generator_cls = ANSWER_GENERATORS.get(name)
    if generator_cls is None:
        known = ", ".join(sorted(ANSWER_GENERATORS))
        msg = f"Unknown answer generator {settings.answer_generator!r} (known: {known})"
        raise UnknownAnswerGeneratorError(msg)
    return generator_cls()
