"""
Entitlement resolver.

Tenant-scoped features consult this service to gate access to named data
partners.
"""

import logging
from typing import Optional

from .interfaces import IEntitlementService, IPartnerPermissionStore
from .repository import get_partner_permission_repository

logger = logging.getLogger(__name__)


# Platform default partner set, used for tenants without any permission rows
DEFAULT_PARTNER_PERMISSIONS: tuple[str, ...] = (
    "cls",
    "cmbs",
    "cmm",
    "compstak",
    "val",
    "reis",
    "infabode",
    "commercialex",
    "enricheddata",
    "retailmarketpoint",
    "databuffet",
    "fourtwentyseven",
)


class EntitlementService(IEntitlementService):
    """Resolves partner permissions from per-tenant rows with a default fallback."""

    def __init__(
        self,
        store: IPartnerPermissionStore,
        default_partners: tuple[str, ...] = DEFAULT_PARTNER_PERMISSIONS,
    ):
        self._store = store
        self._default_partners = default_partners

    async def resolve_partner_permissions(self, company_id: str) -> list[str]:
        partners = self._store.list_partners(company_id)
        if not partners:
            logger.debug(f"No partner permissions for tenant {company_id}, using defaults")
            return list(self._default_partners)
        return partners

    async def has_partner_permission(self, company_id: str, partner: str) -> bool:
        return partner in await self.resolve_partner_permissions(company_id)


# Module-level instance getter
_service_instance: Optional[EntitlementService] = None


def get_entitlement_service() -> EntitlementService:
    """Get the entitlement service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = EntitlementService(get_partner_permission_repository())
    return _service_instance


def reset_entitlement_service() -> None:
    """Reset the entitlement service singleton (for testing)."""
    global _service_instance
    _service_instance = None
