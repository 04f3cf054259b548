"""Chip calculator route handlers.

Stateless endpoints over the pure calculator functions; nothing here
touches the database.

Endpoints:
    POST /api/calculator/distribution  -- Per-player and table chip breakdown.
    POST /api/calculator/feasibility   -- Aggregate supply check.
    POST /api/calculator/export        -- Clipboard text for a distribution.
    POST /api/calculator/validate      -- Validate a chip set draft.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from chipcalc.config import settings
from chipcalc.models.chip_set import ChipSet, Denomination
from chipcalc.models.distribution import (
    DistributionResult,
    FeasibilityResult,
    ValidationResult,
)
from chipcalc.services.chip_set_validator import validate_chip_set
from chipcalc.services.clipboard_formatter import format_for_clipboard
from chipcalc.services.distribution_math import (
    calculate_distribution,
    check_feasibility,
)

logger = logging.getLogger("chipcalc.routes.calculator")

router = APIRouter(prefix="/calculator", tags=["Calculator"])


# ---------------------------------------------------------------------------
# Pydantic request schemas
# ---------------------------------------------------------------------------

class CalculationRequest(BaseModel):
    """Request body shared by the distribution and feasibility endpoints."""
    denominations: list[Denomination]
    target_value_per_player: int = Field(
        ..., ge=0, description="Points each player should receive.",
    )
    player_count: int = Field(
        ..., ge=1, description="Number of players at the table.",
    )


class ExportRequest(CalculationRequest):
    """Request body for POST /api/calculator/export."""
    chip_set_name: str = Field(..., min_length=1)


class ChipSetDraft(BaseModel):
    """Request body for POST /api/calculator/validate."""
    name: str
    denominations: list[Denomination] = Field(default_factory=list)


def _distribute(body: CalculationRequest) -> DistributionResult:
    return calculate_distribution(
        body.denominations,
        body.target_value_per_player,
        body.player_count,
        diversify=settings.DIVERSIFY_STACKS,
        exact_fallback=settings.EXACT_FALLBACK,
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post(
    "/distribution",
    response_model=DistributionResult,
    summary="Calculate chip distribution",
)
async def distribution(body: CalculationRequest) -> DistributionResult:
    """Compute how many chips of each denomination every player gets."""
    return _distribute(body)


@router.post(
    "/feasibility",
    response_model=FeasibilityResult,
    summary="Check how many players a chip set supports",
)
async def feasibility(body: CalculationRequest) -> FeasibilityResult:
    """Check aggregate supply against the requested player count."""
    return check_feasibility(
        body.denominations, body.target_value_per_player, body.player_count
    )


@router.post(
    "/export",
    response_class=PlainTextResponse,
    summary="Export a distribution as clipboard text",
)
async def export(body: ExportRequest) -> str:
    """Render the distribution for the given chips as plain text."""
    result = _distribute(body)
    chip_set = ChipSet(name=body.chip_set_name, denominations=body.denominations)
    return format_for_clipboard(result, body.player_count, chip_set)


@router.post(
    "/validate",
    response_model=ValidationResult,
    summary="Validate a chip set draft",
)
async def validate(body: ChipSetDraft) -> ValidationResult:
    """Report every problem that would block saving this chip set."""
    return validate_chip_set(
        ChipSet(name=body.name, denominations=body.denominations)
    )
