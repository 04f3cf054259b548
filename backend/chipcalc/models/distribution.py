"""Computed results of the chip calculator.

These are pure values recomputed on every input change and never
persisted.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ChipDistribution(BaseModel):
    """How many chips of one denomination are handed out."""

    model_config = {"frozen": True}

    value: int
    count: int
    color: str
    name: Optional[str] = None


class DistributionResult(BaseModel):
    """Per-player breakdown, table-wide totals and advisory warnings."""

    model_config = {"frozen": True}

    per_player: list[ChipDistribution] = Field(default_factory=list)
    total_chips: int = 0
    total_value: int = 0
    table_total: list[ChipDistribution] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class FeasibilityResult(BaseModel):
    """Whether aggregate supply covers the requested player count."""

    model_config = {"frozen": True}

    feasible: bool
    max_players: int
    message: str = ""


class ValidationResult(BaseModel):
    """Outcome of validating a chip set before it is saved."""

    model_config = {"frozen": True}

    valid: bool
    errors: list[str] = Field(default_factory=list)
