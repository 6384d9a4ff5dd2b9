"""Heuristic bias checks over a scored breakdown."""

from __future__ import annotations

from fit_core.models.breakdown import Breakdown
from fit_core.models.job import JobRequirements
from fit_core.models.report import BiasCheckResult, CheckedAreas

# (category, threshold, warning, recommendation)
_BIAS_RULES: tuple[tuple[str, float, str, str], ...] = (
    (
        "location",
        30.0,
        "Low location score may indicate geographic bias",
        "Consider remote work options or location flexibility",
    ),
    (
        "education",
        30.0,
        "Strict education requirements may create bias",
        "Consider alternative qualifications or experience-based evaluation",
    ),
    (
        "skills",
        40.0,
        "Skills matching may be too restrictive",
        "Consider transferable skills and learning potential",
    ),
)


def check_bias(
    breakdown: Breakdown,
    job: JobRequirements,
    *,
    enabled: bool = True,
    strict: bool = False,
) -> BiasCheckResult:
    """Flag sub-scores low enough to suggest the match criteria are exclusionary.

    Each warning costs 20 points. In strict mode any warning fails the check;
    otherwise the check passes while the bias score stays at or above 60.
    """
    if not enabled:
        return BiasCheckResult(passed=True, score=100)

    warnings: list[str] = []
    recommendations: list[str] = []
    for category, threshold, warning, recommendation in _BIAS_RULES:
        # Education is only suspect when the job states a requirement
        if category == "education" and not job.education:
            continue
        if getattr(breakdown, category) < threshold:
            warnings.append(warning)
            recommendations.append(recommendation)

    score = max(0, 100 - len(warnings) * 20)
    passed = not warnings if strict else score >= 60

    return BiasCheckResult(
        passed=passed,
        score=score,
        warnings=warnings,
        recommendations=recommendations,
        checked_areas=CheckedAreas(location=True, education=True),
    )
