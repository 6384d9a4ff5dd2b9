"""Domain models for the fit-score engine."""

from fit_core.models.breakdown import Breakdown, CalibrationModel, OutOfRangePolicy
from fit_core.models.candidate import (
    CandidateProfile,
    EducationSummary,
    ExperienceLevel,
    ExperienceSummary,
    WorkPreferences,
)
from fit_core.models.job import CompanyInfo, ExperienceRequirement, JobRequirements
from fit_core.models.report import (
    BiasCheckResult,
    CheckedAreas,
    ComponentDetail,
    ExplainabilityFactors,
    ExplainabilityReport,
    FitResult,
    ReliabilityMetrics,
    ReliabilityReport,
    ScoreResult,
    Transparency,
)

__all__ = [
    "BiasCheckResult",
    "Breakdown",
    "CalibrationModel",
    "CandidateProfile",
    "CheckedAreas",
    "CompanyInfo",
    "ComponentDetail",
    "EducationSummary",
    "ExperienceLevel",
    "ExperienceRequirement",
    "ExperienceSummary",
    "ExplainabilityFactors",
    "ExplainabilityReport",
    "FitResult",
    "JobRequirements",
    "OutOfRangePolicy",
    "ReliabilityMetrics",
    "ReliabilityReport",
    "ScoreResult",
    "Transparency",
    "WorkPreferences",
]
