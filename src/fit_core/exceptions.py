"""Custom exception hierarchy for the fit-score engine."""

from __future__ import annotations


class FitScoreError(Exception):
    """Base exception for all fit-score errors."""


class InvalidBreakdownError(FitScoreError):
    """Raised when a breakdown is missing categories or holds invalid sub-scores."""


class InvalidCalibrationError(FitScoreError):
    """Raised when calibration coefficients are not finite numbers."""


class ProfileLoadError(FitScoreError):
    """Raised when a candidate, job or breakdown file cannot be loaded."""
