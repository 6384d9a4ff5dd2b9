"""Tests for breakdown and calibration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fit_core.constants import BASE_WEIGHTS
from fit_core.models.breakdown import Breakdown, CalibrationModel
from tests.mocks.mock_factories import make_breakdown


@pytest.mark.unit
class TestBreakdown:
    """Test Breakdown model."""

    def test_reliability_optional(self) -> None:
        """Reliability defaults to None and is excluded from present items."""
        b = make_breakdown()
        assert b.reliability is None
        assert [k for k, _ in b.present_items()] == [
            "skills", "experience", "education", "location", "salary", "culture",
        ]

    def test_present_items_includes_reliability(self) -> None:
        b = make_breakdown(reliability=0.0)
        assert b.present_items()[-1] == ("reliability", 0.0)

    def test_missing_required_field(self) -> None:
        with pytest.raises(ValidationError, match="culture"):
            Breakdown(skills=1, experience=1, education=1, location=1, salary=1)  # type: ignore[call-arg]

    def test_rejects_nan(self) -> None:
        with pytest.raises(ValidationError):
            make_breakdown(skills=float("nan"))

    def test_frozen(self) -> None:
        b = make_breakdown()
        with pytest.raises(ValidationError):
            b.skills = 10.0  # type: ignore[misc]

    def test_extra_keys_ignored(self) -> None:
        b = Breakdown.model_validate(
            {"skills": 1, "experience": 1, "education": 1, "location": 1,
             "salary": 1, "culture": 1, "overall": 99}
        )
        assert not hasattr(b, "overall")


@pytest.mark.unit
class TestCalibrationModel:
    """Test CalibrationModel."""

    def test_valid(self) -> None:
        m = CalibrationModel(a=0.1, b=-5)
        assert (m.a, m.b) == (0.1, -5.0)

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_rejects_non_finite(self, value: float) -> None:
        with pytest.raises(ValidationError):
            CalibrationModel(a=value, b=0.0)


@pytest.mark.unit
class TestBaseWeights:
    """Test the base weight table."""

    def test_values(self) -> None:
        assert sum(BASE_WEIGHTS.values()) == pytest.approx(1.10)
        assert BASE_WEIGHTS["skills"] == 0.30

    def test_immutable(self) -> None:
        with pytest.raises(TypeError):
            BASE_WEIGHTS["skills"] = 0.5  # type: ignore[index]
