"""
Custom weighting profile models.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

WEIGHT_FIELDS = ("safety", "trnsprt", "vitalty", "economc", "sptl_dm", "amenity")


class CustomWeights(BaseModel):
    """A user's weighting profile for one property type."""

    user_id: str = Field(..., description="Owning account ID")
    property_type: str = Field(..., description="Property type tag")
    safety: float = Field(..., description="Safety weight")
    trnsprt: float = Field(..., description="Transportation weight")
    vitalty: float = Field(..., description="Vitality weight")
    economc: float = Field(..., description="Economic weight")
    sptl_dm: float = Field(..., description="Spatial demand weight")
    amenity: float = Field(..., description="Amenity weight")

    @field_validator("user_id", mode="before")
    @classmethod
    def _coerce_user_id(cls, value: Any) -> str:
        return str(value)

    def weights(self) -> dict[str, float]:
        """The six weight dimensions, in their canonical order."""
        return {name: getattr(self, name) for name in WEIGHT_FIELDS}
