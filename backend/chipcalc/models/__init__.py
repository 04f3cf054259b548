"""Pydantic models for ChipCalc."""

from chipcalc.models.common import PyObjectId
from chipcalc.models.chip_set import ChipSet, ChipSetResponse, Denomination
from chipcalc.models.distribution import (
    ChipDistribution,
    DistributionResult,
    FeasibilityResult,
    ValidationResult,
)

__all__ = [
    "PyObjectId",
    # Chip set models
    "ChipSet",
    "ChipSetResponse",
    "Denomination",
    # Calculator results
    "ChipDistribution",
    "DistributionResult",
    "FeasibilityResult",
    "ValidationResult",
]
