"""Chip set route handlers.

Endpoints:
    GET    /api/chip-sets                         -- List chip sets (presets first).
    POST   /api/chip-sets                         -- Create a chip set.
    GET    /api/chip-sets/{chip_set_id}           -- Get one chip set.
    PUT    /api/chip-sets/{chip_set_id}           -- Update (presets are cloned).
    DELETE /api/chip-sets/{chip_set_id}           -- Delete (presets refused).
    POST   /api/chip-sets/{chip_set_id}/standardize  -- Apply 300/500 layout.
    GET    /api/chip-sets/{chip_set_id}/distribution -- Distribution + feasibility.
    GET    /api/chip-sets/{chip_set_id}/export       -- Clipboard text.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from chipcalc.config import settings
from chipcalc.dal.chip_sets_dal import ChipSetDAL
from chipcalc.dal.database import get_database
from chipcalc.models.chip_set import ChipSet, ChipSetResponse, Denomination
from chipcalc.models.distribution import DistributionResult, FeasibilityResult
from chipcalc.services.catalogue import total_chip_count, total_supply_value
from chipcalc.services.chip_set_service import ChipSetService
from chipcalc.services.clipboard_formatter import format_for_clipboard
from chipcalc.services.distribution_math import (
    calculate_distribution,
    check_feasibility,
)

logger = logging.getLogger("chipcalc.routes.chip_sets")

router = APIRouter(prefix="/chip-sets", tags=["Chip Sets"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _get_service() -> ChipSetService:
    """Build a ChipSetService wired to the current database."""
    return ChipSetService(ChipSetDAL(get_database()))


def _to_response(chip_set: ChipSet) -> ChipSetResponse:
    return ChipSetResponse(
        id=str(chip_set.id),
        name=chip_set.name,
        denominations=chip_set.denominations,
        is_preset=chip_set.is_preset,
        total_chips=total_chip_count(chip_set.denominations),
        total_value=total_supply_value(chip_set.denominations),
        created_at=chip_set.created_at.isoformat(),
        updated_at=chip_set.updated_at.isoformat(),
    )


# ---------------------------------------------------------------------------
# Pydantic request / response schemas
# ---------------------------------------------------------------------------

class CreateChipSetRequest(BaseModel):
    """Request body for POST /api/chip-sets."""
    name: str = Field(..., max_length=60)
    denominations: list[Denomination]


class UpdateChipSetRequest(BaseModel):
    """Request body for PUT /api/chip-sets/{chip_set_id}."""
    name: Optional[str] = Field(default=None, max_length=60)
    denominations: Optional[list[Denomination]] = None


class CalculationResponse(BaseModel):
    """Response for GET /api/chip-sets/{chip_set_id}/distribution."""
    distribution: DistributionResult
    feasibility: FeasibilityResult


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------

@router.get(
    "",
    response_model=list[ChipSetResponse],
    summary="List chip sets",
)
async def list_chip_sets() -> list[ChipSetResponse]:
    service = _get_service()
    return [_to_response(cs) for cs in await service.list_chip_sets()]


@router.post(
    "",
    response_model=ChipSetResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a chip set",
)
async def create_chip_set(body: CreateChipSetRequest) -> ChipSetResponse:
    service = _get_service()
    chip_set = await service.create_chip_set(body.name, body.denominations)
    return _to_response(chip_set)


@router.get(
    "/{chip_set_id}",
    response_model=ChipSetResponse,
    summary="Get a chip set",
)
async def get_chip_set(chip_set_id: str) -> ChipSetResponse:
    service = _get_service()
    return _to_response(await service.get_chip_set(chip_set_id))


@router.put(
    "/{chip_set_id}",
    response_model=ChipSetResponse,
    summary="Update a chip set",
)
async def update_chip_set(
    chip_set_id: str, body: UpdateChipSetRequest
) -> ChipSetResponse:
    """Update a chip set. Editing a preset returns a new user-owned copy."""
    service = _get_service()
    chip_set = await service.update_chip_set(
        chip_set_id, name=body.name, denominations=body.denominations
    )
    return _to_response(chip_set)


@router.delete(
    "/{chip_set_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a chip set",
)
async def delete_chip_set(chip_set_id: str) -> Response:
    service = _get_service()
    await service.delete_chip_set(chip_set_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{chip_set_id}/standardize",
    response_model=ChipSetResponse,
    summary="Apply the standard 300/500-chip layout",
)
async def standardize_chip_set(chip_set_id: str) -> ChipSetResponse:
    service = _get_service()
    return _to_response(await service.standardize_chip_set(chip_set_id))


# ---------------------------------------------------------------------------
# Calculations on a stored set
# ---------------------------------------------------------------------------

@router.get(
    "/{chip_set_id}/distribution",
    response_model=CalculationResponse,
    summary="Calculate distribution for a stored chip set",
)
async def chip_set_distribution(
    chip_set_id: str,
    player_count: int = Query(..., ge=1),
    target_value_per_player: int = Query(..., ge=0),
) -> CalculationResponse:
    service = _get_service()
    chip_set = await service.get_chip_set(chip_set_id)
    return CalculationResponse(
        distribution=calculate_distribution(
            chip_set.denominations,
            target_value_per_player,
            player_count,
            diversify=settings.DIVERSIFY_STACKS,
            exact_fallback=settings.EXACT_FALLBACK,
        ),
        feasibility=check_feasibility(
            chip_set.denominations, target_value_per_player, player_count
        ),
    )


@router.get(
    "/{chip_set_id}/export",
    response_class=PlainTextResponse,
    summary="Export a stored chip set's distribution as text",
)
async def chip_set_export(
    chip_set_id: str,
    player_count: int = Query(..., ge=1),
    target_value_per_player: int = Query(..., ge=0),
) -> str:
    service = _get_service()
    chip_set = await service.get_chip_set(chip_set_id)
    result = calculate_distribution(
        chip_set.denominations,
        target_value_per_player,
        player_count,
        diversify=settings.DIVERSIFY_STACKS,
        exact_fallback=settings.EXACT_FALLBACK,
    )
    return format_for_clipboard(result, player_count, chip_set)
