"""Breakdown and calibration models fed into the fit-score computation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from fit_core.constants import ALL_CATEGORIES

OutOfRangePolicy = Literal["clamp", "reject"]


class Breakdown(BaseModel):
    """Per-category sub-scores, conventionally in [0, 100]."""

    model_config = ConfigDict(frozen=True)

    skills: float = Field(allow_inf_nan=False, description="Skills alignment sub-score")
    experience: float = Field(allow_inf_nan=False, description="Experience sub-score")
    education: float = Field(allow_inf_nan=False, description="Education sub-score")
    location: float = Field(allow_inf_nan=False, description="Location sub-score")
    salary: float = Field(allow_inf_nan=False, description="Compensation sub-score")
    culture: float = Field(allow_inf_nan=False, description="Culture sub-score")
    reliability: float | None = Field(
        default=None,
        allow_inf_nan=False,
        description="Reliability sub-score; None excludes it from weighting",
    )

    def present_items(self) -> list[tuple[str, float]]:
        """Return (category, value) pairs for every category that is present."""
        items: list[tuple[str, float]] = []
        for category in ALL_CATEGORIES:
            value = getattr(self, category)
            if value is not None:
                items.append((category, float(value)))
        return items


class CalibrationModel(BaseModel):
    """Logistic calibration coefficients: p = 1 / (1 + e^-(a*score + b))."""

    model_config = ConfigDict(frozen=True)

    a: float = Field(allow_inf_nan=False, description="Slope applied to the raw score")
    b: float = Field(allow_inf_nan=False, description="Intercept")
