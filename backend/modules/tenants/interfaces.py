"""
Tenant module interfaces.

ITenantGateway is the contract for the external tenant directory. It is
always passed to TenantService explicitly so tests can provide a static
gateway instead of a network client.
"""

from datetime import datetime
from typing import Protocol, Optional, runtime_checkable

from .models import Tenant, TenantCreate, TenantUpdate


@runtime_checkable
class ITenantGateway(Protocol):
    """Interface for the tenant directory."""

    async def get_company(self, key: str, value: str) -> Optional[Tenant]:
        """
        Look up a single tenant.

        Args:
            key: Field to match ("id" or "company_name")
            value: Value to match

        Returns:
            Tenant if found, None otherwise

        Raises:
            TenantLookupFailedError: If the directory cannot be reached
        """
        ...

    async def list_companies(self) -> list[Tenant]:
        """List all tenants ordered by company name."""
        ...

    async def create_company(self, data: TenantCreate) -> None:
        """Create a tenant record."""
        ...

    async def update_company(self, key: str, value: str, data: TenantUpdate) -> None:
        """Apply a sparse update to the tenant matched by key/value."""
        ...


@runtime_checkable
class ITenantService(Protocol):
    """Interface for tenant operations used by other modules."""

    async def get_tenant(self, company_id: Optional[str]) -> Optional[Tenant]:
        """Get a tenant by id; blank ids resolve to None without a lookup."""
        ...

    async def list_tenants(self) -> list[Tenant]:
        """List all tenants ordered by name."""
        ...

    def is_term_active(self, tenant: Optional[Tenant], now: Optional[datetime] = None) -> bool:
        """Whether the tenant's subscription term is still running."""
        ...
