"""Abstract screening-answer generator interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from crew_ping_core.models.application import ATSFieldSpec
    from crew_ping_core.models.candidate import CandidateProfile
    from crew_ping_core.models.job import JobPosting


@runtime_checkable
class ScreeningAnswerGenerator(Protocol):
    """Produces free text for fields a profile lookup cannot fill.

    The rule-based implementation is deterministic; a text-generation model
    can be dropped in behind the same call without touching callers.
    """

    def generate_answer(
        self,
        profile: CandidateProfile,
        job: JobPosting,
        field: ATSFieldSpec,
    ) -> str:
        """Return answer text for ``field``, already fitted to its max length."""
        ...
