"""Weighted fit-score computation, logistic calibration and explanations.

All functions here are pure: no I/O, no shared mutable state, safe to call
from any thread or request handler.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from pydantic import ValidationError

from fit_core.constants import (
    BASE_WEIGHTS,
    EXPLANATION_RULES,
    MAX_SUB_SCORE,
    MIN_SUB_SCORE,
    NEUTRAL_RELIABILITY,
    SCORE_ROUNDING_PRECISION,
)
from fit_core.exceptions import InvalidBreakdownError, InvalidCalibrationError
from fit_core.models.breakdown import Breakdown, CalibrationModel, OutOfRangePolicy

BreakdownInput = Breakdown | Mapping[str, object]


def coerce_breakdown(
    breakdown: BreakdownInput,
    policy: OutOfRangePolicy = "clamp",
) -> Breakdown:
    """Validate a breakdown and apply the out-of-range policy.

    Args:
        breakdown: A Breakdown model or a plain mapping of category -> sub-score.
        policy: "clamp" pins values into [0, 100]; "reject" raises on them.

    Returns:
        A Breakdown whose present sub-scores all lie in [0, 100].

    Raises:
        InvalidBreakdownError: A required category is missing, a value is not a
            finite number, or a value is out of range under the "reject" policy.
    """
    breakdown = parse_breakdown(breakdown)

    out_of_range = {
        category: value
        for category, value in breakdown.present_items()
        if not MIN_SUB_SCORE <= value <= MAX_SUB_SCORE
    }
    if not out_of_range:
        return breakdown

    if policy == "reject":
        details = ", ".join(f"{k}={v}" for k, v in out_of_range.items())
        msg = f"sub-scores outside [{MIN_SUB_SCORE:g}, {MAX_SUB_SCORE:g}]: {details}"
        raise InvalidBreakdownError(msg)

    return breakdown.model_copy(
        update={k: clamp_sub_score(v) for k, v in out_of_range.items()}
    )


def parse_breakdown(breakdown: BreakdownInput) -> Breakdown:
    """Validate a mapping into a Breakdown without applying any range policy."""
    if isinstance(breakdown, Breakdown):
        return breakdown
    try:
        return Breakdown.model_validate(dict(breakdown))
    except ValidationError as e:
        raise InvalidBreakdownError(str(e)) from e


def clamp_sub_score(value: float) -> float:
    """Pin a sub-score into [0, 100]."""
    return min(MAX_SUB_SCORE, max(MIN_SUB_SCORE, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity.

    The value is first rounded to a fixed number of decimals so float noise
    such as 62.49999999999999 resolves as the exact tie it represents.
    """
    return math.floor(round(value, SCORE_ROUNDING_PRECISION) + 0.5)


def normalized_weights(breakdown: Breakdown) -> dict[str, float]:
    """Return each present category's share of the weight mass (sums to 1)."""
    present = [category for category, _ in breakdown.present_items()]
    total = sum(BASE_WEIGHTS[category] for category in present)
    return {category: BASE_WEIGHTS[category] / total for category in present}


def compute_fit_score(
    breakdown: BreakdownInput,
    *,
    policy: OutOfRangePolicy = "clamp",
) -> int:
    """Combine category sub-scores into a single 0-100 fit score.

    Base weights are renormalized over the categories present, so omitting
    the optional reliability category keeps the score on the full scale.
    """
    validated = coerce_breakdown(breakdown, policy)
    items = validated.present_items()

    weight_mass = sum(BASE_WEIGHTS[category] for category, _ in items)
    weighted_sum = sum(value * BASE_WEIGHTS[category] for category, value in items)
    return round_half_up(weighted_sum / weight_mass)


def calibrate(score: float, model: CalibrationModel | None = None) -> float:
    """Map a raw score to a match probability.

    Without a model this is the linear fallback ``score / 100``. With a model
    it is the logistic ``1 / (1 + e^-(a*score + b))``, which lies in (0, 1)
    until float precision runs out: for z above roughly 37 it rounds to 1.0,
    and for z below roughly -745 it rounds to 0.0.
    """
    if model is None:
        return score / 100

    if not (math.isfinite(model.a) and math.isfinite(model.b)):
        msg = f"calibration coefficients must be finite, got a={model.a}, b={model.b}"
        raise InvalidCalibrationError(msg)

    z = model.a * score + model.b
    # Split on sign so math.exp never overflows
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    e = math.exp(z)
    return e / (1.0 + e)


def explain(
    breakdown: BreakdownInput,
    *,
    policy: OutOfRangePolicy = "clamp",
) -> list[str]:
    """Return the observations triggered by a breakdown, in fixed rule order."""
    validated = coerce_breakdown(breakdown, policy)

    explanations: list[str] = []
    for category, comparison, threshold, message in EXPLANATION_RULES:
        value = getattr(validated, category)
        if value is None:
            value = NEUTRAL_RELIABILITY
        if _passes(value, comparison, threshold):
            explanations.append(message)
    return explanations


def _passes(value: float, comparison: str, threshold: float) -> bool:
    """Evaluate a single explanation rule."""
    if comparison == ">=":
        return value >= threshold
    if comparison == "<":
        return value < threshold
    msg = f"Unknown comparison: {comparison}"
    raise ValueError(msg)
