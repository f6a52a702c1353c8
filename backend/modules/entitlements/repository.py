"""
Partner permission repository.

Reads the company_partner_permissions table (company_id, partner).
"""

from typing import Optional

from supabase import Client

from shared.database import get_supabase_client
from shared.repository import BaseRepository


class PartnerPermissionRepository(BaseRepository[str]):
    """Repository for tenant partner permission rows."""

    TABLE = "company_partner_permissions"

    def list_partners(self, company_id: str) -> list[str]:
        result = self._execute(
            "list_partners",
            self._db.table(self.TABLE)
            .select("partner")
            .eq("company_id", company_id)
            .order("id"),
        )
        return [row["partner"] for row in result.data or []]


# Module-level instance getter
_repository_instance: Optional[PartnerPermissionRepository] = None


def get_partner_permission_repository(db: Optional[Client] = None) -> PartnerPermissionRepository:
    """Get the partner permission repository singleton."""
    global _repository_instance
    if _repository_instance is None:
        _repository_instance = PartnerPermissionRepository(db or get_supabase_client())
    return _repository_instance


def reset_partner_permission_repository() -> None:
    """Reset the repository singleton (for testing)."""
    global _repository_instance
    _repository_instance = None
