"""
Custom weighting profile service.
"""

from typing import Optional

from .interfaces import IWeightsStore
from .models import CustomWeights
from .repository import get_weights_repository


class WeightsService:
    """Reads and writes per-user, per-property-type weighting profiles."""

    def __init__(self, store: IWeightsStore):
        self._store = store

    async def get_custom_weights(self, user_id: str) -> list[CustomWeights]:
        return self._store.list_for_user(user_id)

    async def set_custom_weights(
        self,
        user_id: str,
        property_type: str,
        safety: float,
        trnsprt: float,
        vitalty: float,
        economc: float,
        sptl_dm: float,
        amenity: float,
    ) -> CustomWeights:
        """Create the profile for (user_id, property_type) or overwrite it in place."""
        return self._store.upsert(
            CustomWeights(
                user_id=user_id,
                property_type=property_type,
                safety=safety,
                trnsprt=trnsprt,
                vitalty=vitalty,
                economc=economc,
                sptl_dm=sptl_dm,
                amenity=amenity,
            )
        )


# Module-level instance getter
_service_instance: Optional[WeightsService] = None


def get_weights_service() -> WeightsService:
    """Get the weights service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = WeightsService(get_weights_repository())
    return _service_instance


def reset_weights_service() -> None:
    """Reset the weights service singleton (for testing)."""
    global _service_instance
    _service_instance = None
