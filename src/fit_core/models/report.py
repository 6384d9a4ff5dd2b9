"""Scoring result, bias check, reliability and explainability models."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from fit_core.models.breakdown import Breakdown


class ReliabilityMetrics(BaseModel):
    """Provider-level data quality metrics supplied alongside a match."""

    provider_id: str = Field(description="Provider that sourced the job data")
    uptime: float = Field(default=1.0, ge=0.0, le=1.0, description="Availability fraction")
    response_time_ms: float = Field(default=0.0, ge=0.0, description="Mean response time")
    error_rate: float = Field(default=0.0, ge=0.0, le=1.0, description="Failed call fraction")
    data_quality: float = Field(default=1.0, ge=0.0, le=1.0, description="Data quality fraction")
    consistency: float = Field(default=1.0, ge=0.0, le=1.0, description="Consistency fraction")


class ReliabilityReport(BaseModel):
    """Outcome of the reliability assessment."""

    score: int = Field(ge=0, le=100, description="Reliability score 0-100")
    factors: list[str] = Field(description="Reasons behind the score")


class CheckedAreas(BaseModel):
    """Which bias areas were inspected."""

    gender: bool = False
    age: bool = False
    ethnicity: bool = False
    disability: bool = False
    location: bool = False
    education: bool = False


class BiasCheckResult(BaseModel):
    """Outcome of the bias heuristics."""

    passed: bool = Field(description="Whether the match passed the bias check")
    score: int = Field(ge=0, le=100, description="Bias score 0-100, higher is better")
    warnings: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    checked_areas: CheckedAreas = Field(default_factory=CheckedAreas)


class ScoreResult(BaseModel):
    """Score, calibrated probability and explanations for one breakdown."""

    score: int = Field(ge=0, le=100, description="Normalized fit score 0-100")
    probability: float = Field(description="Calibrated match probability")
    explanations: list[str] = Field(description="Ordered human-readable observations")


class FitResult(ScoreResult):
    """Full evaluation of a candidate against a job."""

    breakdown: Breakdown = Field(description="Category sub-scores used for the score")
    confidence: float = Field(ge=0.0, le=1.0, description="Confidence from data completeness")
    bias_check: BiasCheckResult = Field(description="Bias heuristics outcome")
    reliability: ReliabilityReport = Field(description="Reliability assessment")
    evaluated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When the match was evaluated"
    )


class ComponentDetail(BaseModel):
    """Explainability entry for one category."""

    score: float = Field(description="Category sub-score")
    weight: float = Field(description="Base weight of the category")
    normalized_weight: float = Field(description="Weight share after renormalization")
    explanation: str = Field(description="Short description of the contribution")


class ExplainabilityFactors(BaseModel):
    """Categories grouped by strength."""

    positive: list[str] = Field(default_factory=list)
    negative: list[str] = Field(default_factory=list)
    neutral: list[str] = Field(default_factory=list)


class Transparency(BaseModel):
    """Provenance of a score."""

    algorithm: str
    version: str
    data_sources: list[str]
    generated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ExplainabilityReport(BaseModel):
    """Detailed, human-facing account of how a fit score was produced."""

    overall_score: int = Field(ge=0, le=100)
    breakdown: dict[str, ComponentDetail]
    factors: ExplainabilityFactors
    recommendations: list[str]
    transparency: Transparency
