"""Settings-aware facade over the scoring functions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from fit_core.constants import (
    ALGORITHM_NAME,
    ALGORITHM_VERSION,
    BASE_WEIGHTS,
    DATA_SOURCES,
    NEGATIVE_FACTOR_THRESHOLD,
    POSITIVE_FACTOR_THRESHOLD,
    RECOMMENDATION_THRESHOLD,
)
from fit_core.models.breakdown import Breakdown, CalibrationModel
from fit_core.models.candidate import CandidateProfile
from fit_core.models.job import JobRequirements
from fit_core.models.report import (
    ComponentDetail,
    ExplainabilityFactors,
    ExplainabilityReport,
    FitResult,
    ReliabilityMetrics,
    ScoreResult,
    Transparency,
)
from fit_engine.bias import check_bias
from fit_engine.components import build_breakdown
from fit_engine.observability.tracing import traced_operation
from fit_engine.reliability import assess_reliability, compute_confidence
from fit_engine.scoring import (
    BreakdownInput,
    calibrate,
    coerce_breakdown,
    compute_fit_score,
    explain,
    normalized_weights,
    parse_breakdown,
    round_half_up,
)

if TYPE_CHECKING:
    from fit_core.config.settings import Settings

logger = structlog.get_logger()

# Category -> recommendation when its sub-score is weak
_RECOMMENDATIONS: tuple[tuple[str, str], ...] = (
    ("skills", "Consider additional training in required technologies"),
    ("experience", "Gain more experience in relevant areas or consider junior roles"),
    ("location", "Discuss remote work options or relocation possibilities"),
    ("salary", "Review salary expectations and market rates"),
)


class FitScoreEngine:
    """Score breakdowns and evaluate candidate/job pairs using configured policy."""

    def __init__(
        self,
        settings: Settings,
        calibration_model: CalibrationModel | None = None,
    ) -> None:
        """Initialize with settings; an explicit calibration model wins over settings."""
        self.settings = settings
        self.calibration_model = calibration_model or settings.calibration_model

    @traced_operation("score")
    def score(self, breakdown: BreakdownInput) -> ScoreResult:
        """Score a breakdown: normalized score, probability and explanations."""
        validated = self._validate(breakdown)
        score = compute_fit_score(validated)
        probability = calibrate(score, self.calibration_model)
        explanations = explain(validated)

        logger.debug(
            "fit_score_computed",
            score=score,
            probability=round(probability, 4),
            explanations=len(explanations),
        )
        return ScoreResult(score=score, probability=probability, explanations=explanations)

    @traced_operation("evaluate")
    def evaluate(
        self,
        candidate: CandidateProfile,
        job: JobRequirements,
        metrics: ReliabilityMetrics | None = None,
    ) -> FitResult:
        """Derive a breakdown from profile data and run the full assessment."""
        reliability = assess_reliability(
            candidate,
            job,
            metrics,
            enabled=self.settings.reliability_enabled,
            min_data_points=self.settings.reliability_min_data_points,
        )
        breakdown = build_breakdown(
            candidate,
            job,
            reliability=reliability.score if self.settings.reliability_enabled else None,
        )
        scored = self.score(breakdown)

        bias_check = check_bias(
            breakdown,
            job,
            enabled=self.settings.bias_checking_enabled,
            strict=self.settings.bias_strict_mode,
        )
        if not bias_check.passed:
            logger.warning(
                "bias_check_failed",
                job_id=job.id,
                candidate_id=candidate.id,
                warnings=bias_check.warnings,
            )

        result = FitResult(
            score=scored.score,
            probability=scored.probability,
            explanations=scored.explanations,
            breakdown=breakdown,
            confidence=compute_confidence(candidate, job),
            bias_check=bias_check,
            reliability=reliability,
        )
        logger.info(
            "fit_evaluated",
            job_id=job.id,
            candidate_id=candidate.id,
            score=result.score,
            confidence=round(result.confidence, 3),
        )
        return result

    def explainability_report(self, result: FitResult) -> ExplainabilityReport:
        """Turn an evaluation into a per-category, human-facing report."""
        breakdown = result.breakdown
        shares = normalized_weights(breakdown)
        # Bands and recommendations read whole-number sub-scores
        rounded = {
            category: round_half_up(value) for category, value in breakdown.present_items()
        }

        details: dict[str, ComponentDetail] = {}
        factors = ExplainabilityFactors()
        for category, value in rounded.items():
            details[category] = ComponentDetail(
                score=value,
                weight=BASE_WEIGHTS[category],
                normalized_weight=shares[category],
                explanation=(
                    f"{category.capitalize()} scored {value} and carries "
                    f"{shares[category]:.0%} of the overall score"
                ),
            )
            if value >= POSITIVE_FACTOR_THRESHOLD:
                factors.positive.append(f"Strong {category} match")
            elif value < NEGATIVE_FACTOR_THRESHOLD:
                factors.negative.append(f"Weak {category} match")
            else:
                factors.neutral.append(f"Moderate {category} match")

        recommendations = [
            message
            for category, message in _RECOMMENDATIONS
            if rounded[category] < RECOMMENDATION_THRESHOLD
        ]
        recommendations.extend(result.bias_check.recommendations)

        return ExplainabilityReport(
            overall_score=result.score,
            breakdown=details,
            factors=factors,
            recommendations=recommendations,
            transparency=Transparency(
                algorithm=ALGORITHM_NAME,
                version=ALGORITHM_VERSION,
                data_sources=list(DATA_SOURCES),
            ),
        )

    def _validate(self, breakdown: BreakdownInput) -> Breakdown:
        """Apply the configured out-of-range policy, logging any clamping."""
        parsed = parse_breakdown(breakdown)
        validated = coerce_breakdown(parsed, self.settings.out_of_range_policy)
        if validated != parsed:
            logger.info(
                "breakdown_clamped",
                original=parsed.model_dump(exclude_none=True),
                clamped=validated.model_dump(exclude_none=True),
            )
        return validated
