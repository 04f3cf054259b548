"""Chip set Data Access Layer -- MongoDB operations for the chip_sets collection.

This is the catalogue repository: list, create, update and delete named
chip sets. Callers pass/receive string ids; unknown or malformed ids
yield None/False rather than raising. Preset protection is enforced by
the service layer, not here.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from chipcalc.models.chip_set import ChipSet, Denomination

logger = logging.getLogger("chipcalc.dal.chip_sets")

COLLECTION = "chip_sets"

# Presets first, then oldest first; backed by the idx_preset_created index
LISTING_ORDER = [("is_preset", DESCENDING), ("created_at", ASCENDING)]


class ChipSetDAL:
    """Data access layer for the chip_sets collection."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._collection = db[COLLECTION]

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    async def create(
        self,
        name: str,
        denominations: list[Denomination],
        is_preset: bool = False,
    ) -> ChipSet:
        """Insert a new chip set and return it with its generated id.

        Args:
            name: Display name of the set.
            denominations: The set's denominations.
            is_preset: Whether this is a built-in, read-only set.

        Returns:
            The ChipSet with its ``id`` populated from the inserted ObjectId.
        """
        chip_set = ChipSet(
            name=name, denominations=denominations, is_preset=is_preset
        )
        result = await self._collection.insert_one(chip_set.to_mongo_dict())
        chip_set.id = str(result.inserted_id)
        logger.info("Created chip set %s (%s)", chip_set.id, name)
        return chip_set

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, chip_set_id: str) -> Optional[ChipSet]:
        """Find a chip set by its MongoDB ``_id``.

        Args:
            chip_set_id: String representation of the ObjectId.

        Returns:
            A ChipSet instance, or None if not found.
        """
        if not ObjectId.is_valid(chip_set_id):
            return None
        doc = await self._collection.find_one({"_id": ObjectId(chip_set_id)})
        if doc is None:
            return None
        doc["_id"] = str(doc["_id"])
        return ChipSet(**doc)

    async def list_all(self) -> list[ChipSet]:
        """List all chip sets, presets first, then oldest first.

        Uses the ``idx_preset_created`` index.
        """
        cursor = self._collection.find().sort(LISTING_ORDER)
        chip_sets: list[ChipSet] = []
        async for doc in cursor:
            doc["_id"] = str(doc["_id"])
            chip_sets.append(ChipSet(**doc))
        return chip_sets

    async def count_all(self) -> int:
        """Count every stored chip set, presets included."""
        return await self._collection.count_documents({})

    async def count_presets(self) -> int:
        """Count the built-in preset sets."""
        return await self._collection.count_documents({"is_preset": True})

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    async def update(
        self,
        chip_set_id: str,
        name: Optional[str] = None,
        denominations: Optional[list[Denomination]] = None,
    ) -> Optional[ChipSet]:
        """Update a chip set's name and/or denominations.

        Args:
            chip_set_id: String ObjectId of the chip set.
            name: New name, or None to keep the current one.
            denominations: New denominations, or None to keep them.

        Returns:
            The updated ChipSet, or None if no such set exists.
        """
        if not ObjectId.is_valid(chip_set_id):
            return None

        fields: dict = {"updated_at": datetime.now(timezone.utc)}
        if name is not None:
            fields["name"] = name
        if denominations is not None:
            fields["denominations"] = [d.model_dump() for d in denominations]

        result = await self._collection.update_one(
            {"_id": ObjectId(chip_set_id)},
            {"$set": fields},
        )
        if result.matched_count == 0:
            return None
        logger.info("Updated chip set %s", chip_set_id)
        return await self.get_by_id(chip_set_id)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    async def delete(self, chip_set_id: str) -> bool:
        """Delete a chip set by its MongoDB ``_id``.

        Args:
            chip_set_id: String representation of the ObjectId.

        Returns:
            True if a document was deleted, False otherwise.
        """
        if not ObjectId.is_valid(chip_set_id):
            return False

        result = await self._collection.delete_one({"_id": ObjectId(chip_set_id)})
        if result.deleted_count > 0:
            logger.info("Deleted chip set %s", chip_set_id)
        return result.deleted_count > 0
