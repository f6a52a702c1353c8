"""
Weights module interfaces.
"""

from typing import Protocol, runtime_checkable

from .models import CustomWeights


@runtime_checkable
class IWeightsStore(Protocol):
    """Storage contract for weighting profiles."""

    def list_for_user(self, user_id: str) -> list[CustomWeights]:
        ...

    def upsert(self, weights: CustomWeights) -> CustomWeights:
        """Insert or overwrite the profile for (user_id, property_type) atomically."""
        ...
