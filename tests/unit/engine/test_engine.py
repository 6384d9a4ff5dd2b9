"""Tests for the FitScoreEngine facade."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from fit_core.exceptions import InvalidBreakdownError
from fit_core.models.breakdown import CalibrationModel
from fit_core.models.candidate import CandidateProfile, WorkPreferences
from fit_core.models.job import JobRequirements
from fit_core.models.report import BiasCheckResult, FitResult, ReliabilityReport
from fit_engine.engine import FitScoreEngine
from tests.mocks.mock_factories import (
    make_breakdown,
    make_candidate_profile,
    make_reliability_metrics,
)
from tests.mocks.mock_settings import make_real_settings, make_settings


@pytest.mark.unit
class TestScore:
    """Test FitScoreEngine.score."""

    def test_score_without_calibration(self, mock_settings: MagicMock) -> None:
        engine = FitScoreEngine(mock_settings)
        result = engine.score(make_breakdown(skills=90, salary=30))
        assert result.score == 66
        assert result.probability == pytest.approx(0.66)
        assert result.explanations == [
            "Strong skills alignment",
            "Compensation may be below your target",
        ]

    def test_explicit_calibration_model(self, mock_settings: MagicMock) -> None:
        engine = FitScoreEngine(mock_settings, calibration_model=CalibrationModel(a=0.1, b=-5))
        result = engine.score(make_breakdown(skills=75, experience=75, education=75,
                                             location=75, salary=75, culture=75))
        assert result.score == 75
        assert result.probability == pytest.approx(0.924, abs=1e-3)

    def test_calibration_from_settings(self) -> None:
        settings = make_real_settings(calibration_a=0.1, calibration_b=-5)
        engine = FitScoreEngine(settings)
        assert engine.calibration_model == CalibrationModel(a=0.1, b=-5)
        assert engine.score(make_breakdown()).probability == pytest.approx(0.731, abs=1e-3)

    def test_clamp_is_logged(self, mock_settings: MagicMock) -> None:
        engine = FitScoreEngine(mock_settings)
        with patch("fit_engine.engine.logger") as mock_logger:
            result = engine.score(make_breakdown(skills=140))
        assert result.score == 72
        events = [c.args[0] for c in mock_logger.info.call_args_list]
        assert "breakdown_clamped" in events

    def test_reject_policy_from_settings(self) -> None:
        engine = FitScoreEngine(make_settings(out_of_range_policy="reject"))
        with pytest.raises(InvalidBreakdownError):
            engine.score(make_breakdown(skills=140))

    def test_accepts_mapping(self, mock_settings: MagicMock) -> None:
        engine = FitScoreEngine(mock_settings)
        values = dict(make_breakdown().model_dump(exclude_none=True))
        assert engine.score(values).score == 60


@pytest.mark.unit
class TestEvaluate:
    """Test FitScoreEngine.evaluate."""

    def test_strong_match(
        self,
        mock_settings: MagicMock,
        sample_candidate: CandidateProfile,
        sample_job: JobRequirements,
    ) -> None:
        """90/100/100/100/100/60 plus reliability 100 over 1.10 rounds to 94."""
        result = FitScoreEngine(mock_settings).evaluate(
            sample_candidate, sample_job, make_reliability_metrics()
        )
        assert result.score == 94
        assert result.breakdown.reliability == 100
        assert result.explanations == [
            "Strong skills alignment",
            "Experience closely matches role level",
            "Reliability record boosts ranking",
        ]
        assert result.confidence == pytest.approx(1.0)
        assert result.bias_check.passed is True
        assert result.reliability.factors == ["All reliability checks passed"]

    def test_reliability_disabled_drops_category(
        self, sample_candidate: CandidateProfile, sample_job: JobRequirements
    ) -> None:
        """Without reliability the six categories are renormalized on their own."""
        engine = FitScoreEngine(make_settings(reliability_enabled=False))
        result = engine.evaluate(sample_candidate, sample_job)
        assert result.breakdown.reliability is None
        # 27 + 25 + 15 + 10 + 10 + 6 = 93
        assert result.score == 93
        assert "Reliability record boosts ranking" not in result.explanations

    def test_bias_failure_is_logged(
        self, mock_settings: MagicMock, sample_job: JobRequirements
    ) -> None:
        candidate = make_candidate_profile(
            skills=["Cobol"],
            preferences=WorkPreferences(locations=["Berlin"]),
        )
        job = sample_job.model_copy(update={"education": None})
        engine = FitScoreEngine(make_settings(bias_strict_mode=True))
        with patch("fit_engine.engine.logger") as mock_logger:
            result = engine.evaluate(candidate, job)
        assert result.bias_check.passed is False
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "bias_check_failed"

    def test_evaluation_is_logged(
        self,
        mock_settings: MagicMock,
        sample_candidate: CandidateProfile,
        sample_job: JobRequirements,
    ) -> None:
        with patch("fit_engine.engine.logger") as mock_logger:
            FitScoreEngine(mock_settings).evaluate(sample_candidate, sample_job)
        mock_logger.info.assert_called_once()
        call = mock_logger.info.call_args
        assert call.args[0] == "fit_evaluated"
        assert call.kwargs["job_id"] == "job-001"
        assert call.kwargs["candidate_id"] == "cand-001"


@pytest.mark.unit
class TestExplainabilityReport:
    """Test FitScoreEngine.explainability_report."""

    def test_report_for_strong_match(
        self,
        mock_settings: MagicMock,
        sample_candidate: CandidateProfile,
        sample_job: JobRequirements,
    ) -> None:
        engine = FitScoreEngine(mock_settings)
        result = engine.evaluate(sample_candidate, sample_job)
        report = engine.explainability_report(result)

        assert report.overall_score == result.score
        assert set(report.breakdown) == {
            "skills", "experience", "education", "location", "salary", "culture",
            "reliability",
        }
        assert report.breakdown["skills"].weight == 0.30
        assert report.breakdown["skills"].normalized_weight == pytest.approx(0.30 / 1.10)
        assert sum(d.normalized_weight for d in report.breakdown.values()) == pytest.approx(1.0)
        assert "Strong skills match" in report.factors.positive
        assert report.factors.neutral == ["Moderate culture match"]
        assert report.factors.negative == []
        assert report.recommendations == []
        assert report.transparency.version == "1.0.0"
        assert "candidate_profile" in report.transparency.data_sources

    def test_report_recommendations_for_weak_match(self, mock_settings: MagicMock) -> None:
        engine = FitScoreEngine(mock_settings)
        candidate = make_candidate_profile(
            skills=["Cobol"],
            preferences=WorkPreferences(
                locations=["Berlin"], salary_min=300_000, salary_max=350_000
            ),
        )
        job = JobRequirements.model_validate(
            {
                "title": "Engineer",
                "must_have": ["Python", "Go"],
                "education": "Bachelor's degree",
                "preferences": {
                    "locations": ["Austin, TX"],
                    "salary_min": 120_000,
                    "salary_max": 150_000,
                },
                "company": {"name": "Acme"},
            }
        )
        result = engine.evaluate(candidate, job)
        report = engine.explainability_report(result)

        assert "Consider additional training in required technologies" in report.recommendations
        assert "Discuss remote work options or relocation possibilities" in report.recommendations
        assert "Review salary expectations and market rates" in report.recommendations
        # Bias recommendations are appended after category ones
        assert report.recommendations[-1] == result.bias_check.recommendations[-1]
        assert "Weak skills match" in report.factors.negative

    def test_bands_use_rounded_sub_scores(self, mock_settings: MagicMock) -> None:
        """59.6 rounds to 60 and 79.5 to 80 before thresholds are applied."""
        breakdown = make_breakdown(skills=79.5, experience=59.6, location=49.5)
        result = FitResult(
            score=60,
            probability=0.6,
            explanations=[],
            breakdown=breakdown,
            confidence=1.0,
            bias_check=BiasCheckResult(passed=True, score=100),
            reliability=ReliabilityReport(score=100, factors=[]),
        )
        report = FitScoreEngine(mock_settings).explainability_report(result)

        assert report.breakdown["skills"].score == 80
        assert report.breakdown["experience"].score == 60
        assert "Strong skills match" in report.factors.positive
        assert "Moderate location match" in report.factors.neutral
        # Experience at 59.6 counts as 60 and draws no recommendation
        assert report.recommendations == [
            "Discuss remote work options or relocation possibilities"
        ]
