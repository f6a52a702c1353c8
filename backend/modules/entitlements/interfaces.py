"""
Entitlements module interfaces.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IPartnerPermissionStore(Protocol):
    """Storage contract for per-tenant partner permission rows."""

    def list_partners(self, company_id: str) -> list[str]:
        """
        Get the partner tags granted to a tenant, in stored order.

        Returns:
            Partner tags, or an empty list if the tenant has no rows
        """
        ...


@runtime_checkable
class IEntitlementService(Protocol):
    """Interface for resolving tenant entitlements."""

    async def resolve_partner_permissions(self, company_id: str) -> list[str]:
        """
        Resolve the data partners a tenant may access.

        Tenant-specific rows fully replace the platform default set.
        """
        ...

    async def has_partner_permission(self, company_id: str, partner: str) -> bool:
        """Whether a tenant may access a named data partner."""
        ...
