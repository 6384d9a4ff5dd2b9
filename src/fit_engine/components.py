"""Category scorers that derive a breakdown from a candidate and a job."""

from __future__ import annotations

from fit_core.constants import (
    DEGREE_KEYWORDS,
    EXPERIENCE_LEVELS,
    NEUTRAL_COMPONENT_SCORE,
)
from fit_core.models.breakdown import Breakdown
from fit_core.models.candidate import CandidateProfile
from fit_core.models.job import JobRequirements


def build_breakdown(
    candidate: CandidateProfile,
    job: JobRequirements,
    reliability: float | None = None,
) -> Breakdown:
    """Score every category and assemble the breakdown.

    ``reliability`` is passed through untouched; leave it None to exclude the
    category from weighting.
    """
    return Breakdown(
        skills=skills_score(candidate, job),
        experience=experience_score(candidate, job),
        education=education_score(candidate, job),
        location=location_score(candidate, job),
        salary=salary_score(candidate, job),
        culture=culture_score(candidate, job),
        reliability=reliability,
    )


def skills_score(candidate: CandidateProfile, job: JobRequirements) -> float:
    """Required skills count for 80%, nice-to-have for 20%."""
    candidate_skills = {s.strip().lower() for s in candidate.skills}
    required = {s.strip().lower() for s in job.must_have}
    nice_to_have = {s.strip().lower() for s in job.nice_to_have}

    if required:
        required_ratio = len(required & candidate_skills) / len(required)
    else:
        required_ratio = 0.5
    nice_ratio = len(nice_to_have & candidate_skills) / max(len(nice_to_have), 1)

    return (required_ratio * 0.8 + nice_ratio * 0.2) * 100


def experience_score(candidate: CandidateProfile, job: JobRequirements) -> float:
    """Blend of seniority level, years and industry relevance."""
    level = level_score(candidate.experience.level, job.experience.level)
    years = years_score(candidate.experience.years, job.experience.years)
    industry = industry_score(candidate, job)
    return level * 0.4 + years * 0.4 + industry * 0.2


def level_score(candidate_level: str, required_level: str) -> float:
    """Overqualified is still good; each level short costs more."""
    candidate_index = EXPERIENCE_LEVELS.index(candidate_level)
    required_index = EXPERIENCE_LEVELS.index(required_level)

    if candidate_index == required_index:
        return 100.0
    if candidate_index > required_index:
        return 90.0
    if candidate_index == required_index - 1:
        return 70.0
    return 40.0


def years_score(candidate_years: float, required_years: float) -> float:
    if required_years <= 0 or candidate_years >= required_years:
        return 100.0
    if candidate_years >= required_years * 0.8:
        return 80.0
    if candidate_years >= required_years * 0.6:
        return 60.0
    return max(20.0, candidate_years / required_years * 50)


def industry_score(candidate: CandidateProfile, job: JobRequirements) -> float:
    job_industry = (job.company.industry or "").strip().lower()
    if not job_industry:
        return NEUTRAL_COMPONENT_SCORE

    industries = {i.strip().lower() for i in candidate.experience.industries}
    return 100.0 if job_industry in industries else 30.0


def education_score(candidate: CandidateProfile, job: JobRequirements) -> float:
    """Keyword match between the requirement text and the candidate's degree."""
    if not job.education:
        return NEUTRAL_COMPONENT_SCORE

    degree = candidate.education.degree.lower()
    required = job.education.lower()

    for keyword in DEGREE_KEYWORDS:
        if keyword in required and keyword in degree:
            return 100.0
    if "degree" in required and "degree" in degree:
        return 80.0
    if "certificate" in required and "certificate" in degree:
        return 70.0
    return 30.0


def location_score(candidate: CandidateProfile, job: JobRequirements) -> float:
    """Remote compatibility first, then exact or partial place matching."""
    candidate_remote = candidate.preferences.remote
    job_remote = job.preferences.remote

    if job_remote and candidate_remote:
        return 100.0
    if job_remote:
        return 70.0
    if candidate_remote:
        return 40.0

    if not job.preferences.locations:
        return NEUTRAL_COMPONENT_SCORE
    job_location = job.preferences.locations[0].strip().lower()
    if not job_location:
        return NEUTRAL_COMPONENT_SCORE

    candidate_locations = {loc.strip().lower() for loc in candidate.preferences.locations}
    if job_location in candidate_locations:
        return 100.0

    # "Austin, TX" -> city "austin", region "tx"
    parts = [p.strip() for p in job_location.split(",") if p.strip()]
    for location in candidate_locations:
        if any(part in location for part in parts):
            return 80.0
    return 20.0


def salary_score(candidate: CandidateProfile, job: JobRequirements) -> float:
    """Compare salary ranges; a candidate asking above the job's ceiling loses points."""
    candidate_min = candidate.preferences.salary_min
    job_min = job.preferences.salary_min
    if not candidate_min or not job_min:
        return NEUTRAL_COMPONENT_SCORE

    candidate_max = candidate.preferences.salary_max or candidate_min
    job_max = job.preferences.salary_max or job_min

    if candidate_min <= job_max and candidate_max >= job_min:
        return 100.0
    if candidate_min > job_max:
        gap_ratio = (candidate_min - job_max) / candidate_min
        return max(0.0, 100 - gap_ratio * 200)
    # Job pays more than the candidate expects
    return 80.0


def culture_score(candidate: CandidateProfile, job: JobRequirements) -> float:
    # TODO: match candidate values against company culture tags once profiles carry them
    if not job.company.culture:
        return NEUTRAL_COMPONENT_SCORE
    return 60.0
