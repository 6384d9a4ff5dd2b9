"""Shared constants for the fit-score engine."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# Category names in scoring order
REQUIRED_CATEGORIES: tuple[str, ...] = (
    "skills",
    "experience",
    "education",
    "location",
    "salary",
    "culture",
)
OPTIONAL_CATEGORIES: tuple[str, ...] = ("reliability",)
ALL_CATEGORIES: tuple[str, ...] = REQUIRED_CATEGORIES + OPTIONAL_CATEGORIES

# Base weights before renormalization; sums to 1.10 with reliability present
BASE_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "skills": 0.30,
        "experience": 0.25,
        "education": 0.15,
        "location": 0.10,
        "salary": 0.10,
        "culture": 0.10,
        "reliability": 0.10,
    }
)

# Sub-score domain
MIN_SUB_SCORE = 0.0
MAX_SUB_SCORE = 100.0

# Absent reliability is treated as this value when explaining
NEUTRAL_RELIABILITY = 50.0

# Weighted mean is rounded to this many places before half-up rounding
SCORE_ROUNDING_PRECISION = 9

# Explanation rules: (category, comparison, threshold, message), emitted in order
EXPLANATION_RULES: tuple[tuple[str, str, float, str], ...] = (
    ("skills", ">=", 80.0, "Strong skills alignment"),
    ("experience", ">=", 80.0, "Experience closely matches role level"),
    ("salary", "<", 50.0, "Compensation may be below your target"),
    ("reliability", ">=", 70.0, "Reliability record boosts ranking"),
    ("location", "<", 50.0, "Commute/location may be a mismatch"),
)

# Experience levels, lowest to highest
EXPERIENCE_LEVELS: tuple[str, ...] = ("entry", "mid", "senior", "lead")

# Education keywords matched between requirement and degree, strongest first
DEGREE_KEYWORDS: tuple[str, ...] = ("phd", "master", "bachelor", "associate")

# Neutral component score when a side of the comparison has no data
NEUTRAL_COMPONENT_SCORE = 50.0

# Explainability factor bands
POSITIVE_FACTOR_THRESHOLD = 80.0
NEGATIVE_FACTOR_THRESHOLD = 50.0
RECOMMENDATION_THRESHOLD = 60.0

# Data points counted for reliability and confidence
MAX_DATA_POINTS = 9

ALGORITHM_NAME = "ProofOfFit Weighted Scoring with Logistic Calibration"
ALGORITHM_VERSION = "1.0.0"
DATA_SOURCES: tuple[str, ...] = ("candidate_profile", "job_requirements", "reliability_metrics")
