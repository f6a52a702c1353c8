"""
Entitlements module.

Resolves per-tenant data partner permissions.

Public API:
- IEntitlementService / IPartnerPermissionStore: Interfaces
- EntitlementService: Resolver with the platform default fallback
- DEFAULT_PARTNER_PERMISSIONS: The platform default partner set
"""

from .interfaces import IEntitlementService, IPartnerPermissionStore
from .repository import (
    PartnerPermissionRepository,
    get_partner_permission_repository,
    reset_partner_permission_repository,
)
from .service import (
    DEFAULT_PARTNER_PERMISSIONS,
    EntitlementService,
    get_entitlement_service,
    reset_entitlement_service,
)

__all__ = [
    "IEntitlementService",
    "IPartnerPermissionStore",
    "PartnerPermissionRepository",
    "get_partner_permission_repository",
    "reset_partner_permission_repository",
    "DEFAULT_PARTNER_PERMISSIONS",
    "EntitlementService",
    "get_entitlement_service",
    "reset_entitlement_service",
]
