"""
Weighting profile repository.

The custom_weights table has a unique constraint on (user_id, property_type),
which lets the upsert run as one statement.
"""

from typing import Any, Optional

from supabase import Client

from shared.database import get_supabase_client
from shared.repository import BaseRepository

from .models import CustomWeights


class WeightsRepository(BaseRepository[CustomWeights]):
    """Repository for custom weighting profiles."""

    TABLE = "custom_weights"
    CONFLICT_KEY = "user_id,property_type"

    def list_for_user(self, user_id: str) -> list[CustomWeights]:
        result = self._execute(
            "list_for_user",
            self._db.table(self.TABLE).select("*").eq("user_id", user_id).order("property_type"),
        )
        return [self._map_to_weights(row) for row in result.data or []]

    def upsert(self, weights: CustomWeights) -> CustomWeights:
        result = self._execute(
            "upsert",
            self._db.table(self.TABLE).upsert(
                weights.model_dump(mode="json"),
                on_conflict=self.CONFLICT_KEY,
            ),
        )
        return self._map_to_weights(result.data[0]) if result.data else weights

    def _map_to_weights(self, data: dict[str, Any]) -> CustomWeights:
        """Map a database row to a CustomWeights model."""
        return CustomWeights(
            user_id=data["user_id"],
            property_type=data["property_type"],
            safety=data["safety"],
            trnsprt=data["trnsprt"],
            vitalty=data["vitalty"],
            economc=data["economc"],
            sptl_dm=data["sptl_dm"],
            amenity=data["amenity"],
        )


# Module-level instance getter
_repository_instance: Optional[WeightsRepository] = None


def get_weights_repository(db: Optional[Client] = None) -> WeightsRepository:
    """Get the weights repository singleton."""
    global _repository_instance
    if _repository_instance is None:
        _repository_instance = WeightsRepository(db or get_supabase_client())
    return _repository_instance


def reset_weights_repository() -> None:
    """Reset the repository singleton (for testing)."""
    global _repository_instance
    _repository_instance = None
