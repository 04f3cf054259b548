"""Chip set and denomination models.

A chip set is a named catalogue of denominations stored in the
``chip_sets`` collection. Presets are the built-in sets shipped with
the application and are never modified in place.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_serializer

from chipcalc.models.common import PyObjectId


class Denomination(BaseModel):
    """One chip type: face value, available quantity, color and label.

    Range rules (positive value, quantity of at least one) are checked
    by the chip-set validator rather than here, so drafts being edited
    can hold zero quantities and every problem is reported at once.
    """

    value: int
    quantity: int
    color: str = Field(..., min_length=1)
    name: Optional[str] = None


class ChipSet(BaseModel):
    """A named set of denominations stored in the chip_sets collection."""

    model_config = {"populate_by_name": True, "arbitrary_types_allowed": True}

    id: Optional[PyObjectId] = Field(default=None, alias="_id")
    name: str
    denominations: list[Denomination] = Field(default_factory=list)
    is_preset: bool = False
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @field_serializer("id")
    def serialize_id(self, value: Optional[str], _info) -> Optional[str]:
        if value is not None:
            return str(value)
        return value

    @field_serializer("created_at", "updated_at", when_used="json")
    def serialize_datetime(self, value: datetime, _info) -> str:
        return value.isoformat()

    def to_mongo_dict(self) -> dict:
        """Convert model to a MongoDB-insertable dict, excluding None id."""
        data = self.model_dump(by_alias=True, mode="python")
        # Remove _id if None so MongoDB generates one
        if data.get("_id") is None:
            data.pop("_id", None)
        return data


class ChipSetResponse(BaseModel):
    """Response model for chip set data returned via API."""

    id: str
    name: str
    denominations: list[Denomination]
    is_preset: bool
    total_chips: int
    total_value: int
    created_at: str
    updated_at: str
