"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from fit_core.models.breakdown import Breakdown
from fit_core.models.candidate import CandidateProfile
from fit_core.models.job import JobRequirements
from fit_engine.observability import tracing
from tests.mocks.mock_factories import (
    make_breakdown,
    make_candidate_profile,
    make_job_requirements,
)
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def sample_breakdown() -> Breakdown:
    """Return a breakdown with every required category at 60."""
    return make_breakdown()


@pytest.fixture
def sample_candidate() -> CandidateProfile:
    """Return a well-populated candidate profile."""
    return make_candidate_profile()


@pytest.fixture
def sample_job() -> JobRequirements:
    """Return a job the sample candidate fits well."""
    return make_job_requirements()


@pytest.fixture(autouse=True)
def _no_tracer() -> Iterator[None]:
    """Keep tests independent of any tracer a previous test installed."""
    original = tracing._tracer
    tracing._tracer = None
    yield
    tracing._tracer = original
