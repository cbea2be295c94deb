"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from crew_ping_core.models.candidate import CandidateProfile, CandidateRecord
from crew_ping_core.models.job import JobPosting
from crew_ping_core.models.targeting import TargetingCriteria
from tests.mocks.mock_factories import (
    make_candidate_record,
    make_criteria,
    make_job,
    make_profile,
)
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def sample_candidate() -> CandidateRecord:
    """Return an eligible Houston candidate holding OSHA 30 and NFPA 70E."""
    return make_candidate_record()


@pytest.fixture
def houston_criteria() -> TargetingCriteria:
    """Return Houston criteria requiring OSHA 30 and NFPA 70E."""
    return make_criteria()


@pytest.fixture
def sample_profile() -> CandidateProfile:
    """Return a qualified electrician profile."""
    return make_profile()


@pytest.fixture
def sample_job() -> JobPosting:
    """Return a Workday electrician posting."""
    return make_job()
