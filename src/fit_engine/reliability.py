"""Data reliability assessment and confidence for a candidate/job pair."""

from __future__ import annotations

from fit_core.constants import MAX_DATA_POINTS
from fit_core.models.candidate import CandidateProfile
from fit_core.models.job import JobRequirements
from fit_core.models.report import ReliabilityMetrics, ReliabilityReport


def count_data_points(candidate: CandidateProfile, job: JobRequirements) -> int:
    """Count populated fields that the component scorers depend on."""
    checks = (
        bool(candidate.skills),
        candidate.experience.years > 0,
        bool(candidate.education.degree),
        bool(candidate.preferences.locations),
        bool(candidate.preferences.salary_min),
        bool(job.must_have),
        job.experience.years > 0,
        bool(job.preferences.locations),
        bool(job.preferences.salary_min),
    )
    return sum(checks)


def assess_reliability(
    candidate: CandidateProfile,
    job: JobRequirements,
    metrics: ReliabilityMetrics | None = None,
    *,
    enabled: bool = True,
    min_data_points: int = 3,
) -> ReliabilityReport:
    """Start from 100 and deduct for each data-quality problem found."""
    if not enabled:
        return ReliabilityReport(score=100, factors=["Reliability checking disabled"])

    score = 100
    factors: list[str] = []

    data_points = count_data_points(candidate, job)
    if data_points < min_data_points:
        score -= 20
        factors.append(f"Insufficient data points ({data_points}/{min_data_points})")

    if len(candidate.skills) < 3:
        score -= 15
        factors.append("Limited skills data")

    if candidate.experience.years <= 0:
        score -= 10
        factors.append("Missing experience data")

    if not job.must_have:
        score -= 15
        factors.append("Incomplete job requirements")

    if metrics is not None:
        if metrics.data_quality < 0.8:
            score -= 10
            factors.append("Low data quality from provider")
        if metrics.consistency < 0.7:
            score -= 5
            factors.append("Inconsistent provider data")

    if not factors:
        factors.append("All reliability checks passed")

    return ReliabilityReport(score=max(0, score), factors=factors)


def compute_confidence(candidate: CandidateProfile, job: JobRequirements) -> float:
    """Confidence in [0, 1] from overall, skills and requirement completeness."""
    data_completeness = count_data_points(candidate, job) / MAX_DATA_POINTS
    skills_completeness = min(1.0, len(candidate.skills) / 5)
    job_completeness = min(1.0, len(job.must_have) / 3)
    return data_completeness * 0.5 + skills_completeness * 0.3 + job_completeness * 0.2
