"""Chip set business logic service.

Applies validation and preset protection on top of the chip set
repository. Sits between route handlers and the DAL.
"""

import logging
from typing import Optional

from fastapi import HTTPException, status

from chipcalc.dal.chip_sets_dal import ChipSetDAL
from chipcalc.models.chip_set import ChipSet, Denomination
from chipcalc.services.catalogue import PRESET_CHIP_SETS, apply_standard_distribution
from chipcalc.services.chip_set_validator import validate_chip_set

logger = logging.getLogger("chipcalc.services.chip_set")

_CLONE_SUFFIX = " (copy)"


class ChipSetService:
    """Service layer for chip set operations."""

    def __init__(self, chip_set_dal: ChipSetDAL) -> None:
        self._chip_set_dal = chip_set_dal

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_valid(self, chip_set: ChipSet) -> None:
        """Raise 422 with every validation error if the set is invalid."""
        validation = validate_chip_set(chip_set)
        if not validation.valid:
            logger.warning(
                "Rejected chip set '%s': %s", chip_set.name, "; ".join(validation.errors)
            )
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail={
                    "message": "Invalid chip set",
                    "errors": validation.errors,
                },
            )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def list_chip_sets(self) -> list[ChipSet]:
        """List all chip sets, presets first."""
        return await self._chip_set_dal.list_all()

    async def get_chip_set(self, chip_set_id: str) -> ChipSet:
        """Get a chip set by id.

        Raises:
            HTTPException 404: Chip set not found.
        """
        chip_set = await self._chip_set_dal.get_by_id(chip_set_id)
        if chip_set is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Chip set not found",
            )
        return chip_set

    # ------------------------------------------------------------------
    # Create / update
    # ------------------------------------------------------------------

    async def create_chip_set(
        self, name: str, denominations: list[Denomination]
    ) -> ChipSet:
        """Validate and store a new user-defined chip set.

        Raises:
            HTTPException 422: The chip set fails validation.
        """
        name = name.strip()
        self._require_valid(ChipSet(name=name, denominations=denominations))
        return await self._chip_set_dal.create(name, denominations)

    async def update_chip_set(
        self,
        chip_set_id: str,
        name: Optional[str] = None,
        denominations: Optional[list[Denomination]] = None,
    ) -> ChipSet:
        """Update a chip set, cloning it first when it is a preset.

        Presets are read-only: editing one stores the edited version as a
        new user set (named "<preset> (copy)" unless a name is given) and
        leaves the preset untouched.

        Returns:
            The updated set, or the new clone for presets.

        Raises:
            HTTPException 404: Chip set not found.
            HTTPException 422: The edited set fails validation.
            HTTPException 500: The update could not be stored.
        """
        current = await self.get_chip_set(chip_set_id)

        if name is not None:
            name = name.strip()
        edited = ChipSet(
            name=name if name is not None else current.name,
            denominations=(
                denominations if denominations is not None else current.denominations
            ),
        )

        if current.is_preset:
            if name is None:
                edited.name = f"{current.name}{_CLONE_SUFFIX}"
            self._require_valid(edited)
            clone = await self._chip_set_dal.create(edited.name, edited.denominations)
            logger.info(
                "Cloned preset %s into chip set %s", chip_set_id, clone.id
            )
            return clone

        self._require_valid(edited)
        updated = await self._chip_set_dal.update(
            chip_set_id, name=name, denominations=denominations
        )
        if updated is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update chip set",
            )
        return updated

    async def standardize_chip_set(self, chip_set_id: str) -> ChipSet:
        """Apply the standard 300/500-chip layout to a set.

        Presets are cloned like any other edit.

        Raises:
            HTTPException 404: Chip set not found.
            HTTPException 422: The set holds neither 300 nor 500 chips.
        """
        current = await self.get_chip_set(chip_set_id)
        standardized = apply_standard_distribution(current.denominations)
        if standardized is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Standard layouts exist only for 300- and 500-chip sets",
            )
        return await self.update_chip_set(chip_set_id, denominations=standardized)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    async def delete_chip_set(self, chip_set_id: str) -> None:
        """Delete a user-defined chip set.

        Raises:
            HTTPException 404: Chip set not found.
            HTTPException 403: The set is a preset.
        """
        chip_set = await self.get_chip_set(chip_set_id)
        if chip_set.is_preset:
            logger.warning("Refused to delete preset chip set %s", chip_set_id)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Preset chip sets cannot be deleted",
            )
        deleted = await self._chip_set_dal.delete(chip_set_id)
        if not deleted:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Chip set not found",
            )

    # ------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------

    async def seed_presets(self) -> int:
        """Insert the built-in presets when the repository has none.

        Returns:
            The number of presets inserted.
        """
        if await self._chip_set_dal.count_presets() > 0:
            return 0
        for preset in PRESET_CHIP_SETS:
            await self._chip_set_dal.create(
                preset["name"], preset["denominations"], is_preset=True
            )
        logger.info("Seeded %d preset chip sets", len(PRESET_CHIP_SETS))
        return len(PRESET_CHIP_SETS)
