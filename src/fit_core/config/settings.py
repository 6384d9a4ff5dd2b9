"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fit_core.models.breakdown import CalibrationModel, OutOfRangePolicy


class Settings(BaseSettings):
    """Central configuration for the fit-score engine."""

    model_config = SettingsConfigDict(env_prefix="FIT_", env_file=".env")

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: human-readable console or JSON lines",
    )

    # --- Scoring ---
    out_of_range_policy: OutOfRangePolicy = Field(
        default="clamp",
        description="How sub-scores outside [0, 100] are handled: clamp or reject",
    )
    calibration_a: float | None = Field(
        default=None,
        allow_inf_nan=False,
        description="Logistic calibration slope (requires calibration_b)",
    )
    calibration_b: float | None = Field(
        default=None,
        allow_inf_nan=False,
        description="Logistic calibration intercept (requires calibration_a)",
    )

    # --- Bias checking ---
    bias_checking_enabled: bool = Field(
        default=True,
        description="Run bias heuristics on evaluated matches",
    )
    bias_strict_mode: bool = Field(
        default=False,
        description="Fail the bias check on any warning",
    )

    # --- Reliability ---
    reliability_enabled: bool = Field(
        default=True,
        description="Assess data reliability and feed it into the breakdown",
    )
    reliability_min_data_points: int = Field(
        default=3,
        ge=0,
        description="Minimum populated data points before reliability is penalized",
    )

    # --- Tracing ---
    otel_exporter: Literal["none", "console", "otlp"] = Field(
        default="none",
        description="OpenTelemetry span exporter",
    )
    otel_endpoint: str = Field(
        default="http://localhost:4317",
        description="OTLP collector endpoint",
    )
    otel_service_name: str = Field(
        default="proof-of-fit",
        description="Service name reported on spans",
    )

    @model_validator(mode="after")
    def validate_calibration_pair(self) -> Settings:
        """Require both calibration coefficients or neither."""
        if (self.calibration_a is None) != (self.calibration_b is None):
            msg = "calibration_a and calibration_b must be set together"
            raise ValueError(msg)
        return self

    @property
    def calibration_model(self) -> CalibrationModel | None:
        """Return the configured calibration model, if any."""
        if self.calibration_a is None or self.calibration_b is None:
            return None
        return CalibrationModel(a=self.calibration_a, b=self.calibration_b)
