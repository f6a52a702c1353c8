"""
Tenant directory gateways.

This module implements the ITenantGateway interface with two
implementations:
- HttpTenantGateway: Talks to the tenant directory service over HTTP
- StaticTenantGateway: Uses injected tenant records (development/tests)
"""

import logging
import uuid
from typing import Any, Optional

import httpx

from .exceptions import TenantLookupFailedError
from .interfaces import ITenantGateway
from .models import Tenant, TenantCreate, TenantUpdate

logger = logging.getLogger(__name__)

# Failures that mean the directory could not be reached or answered with a
# body that is not a company record
RESPONSE_ERRORS = (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError)


class HttpTenantGateway(ITenantGateway):
    """
    Tenant gateway backed by the tenant directory HTTP API.

    Endpoints:
        GET   /companies/lookup?field=<key>&value=<value>   single record (404 if absent)
        GET   /companies?order_by=company_name               {"data": [...]}
        POST  /companies                                     create
        PATCH /companies/lookup?field=<key>&value=<value>   sparse update

    The underlying httpx.AsyncClient is long-lived and safe to share
    between concurrent requests.
    """

    def __init__(
        self,
        base_url: str = "",
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the gateway.

        Args:
            base_url: Root URL of the tenant directory
            api_key: Bearer token for the directory, if it requires one
            timeout: Request timeout in seconds
            client: Pre-built client (tests inject one with a MockTransport).
                    When given, base_url/api_key/timeout are ignored.
        """
        if client is None:
            headers = {"Content-Type": "application/json"}
            if api_key:
                headers["Authorization"] = f"Bearer {api_key}"
            client = httpx.AsyncClient(base_url=base_url, headers=headers, timeout=timeout)
        self._client = client

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def get_company(self, key: str, value: str) -> Optional[Tenant]:
        try:
            response = await self._client.get(
                "/companies/lookup",
                params={"field": key, "value": value},
            )
            if response.status_code == 404:
                return None
            response.raise_for_status()
            data = response.json()
            if not data:
                return None
            return self._map_to_tenant(data)
        except RESPONSE_ERRORS as e:
            raise TenantLookupFailedError("get_company", str(e)) from e

    async def list_companies(self) -> list[Tenant]:
        try:
            response = await self._client.get(
                "/companies",
                params={"order_by": "company_name"},
            )
            response.raise_for_status()
            return [self._map_to_tenant(row) for row in response.json().get("data", [])]
        except RESPONSE_ERRORS as e:
            raise TenantLookupFailedError("list_companies", str(e)) from e

    async def create_company(self, data: TenantCreate) -> None:
        try:
            response = await self._client.post(
                "/companies",
                json=data.model_dump(mode="json"),
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TenantLookupFailedError("create_company", str(e)) from e

    async def update_company(self, key: str, value: str, data: TenantUpdate) -> None:
        try:
            response = await self._client.patch(
                "/companies/lookup",
                params={"field": key, "value": value},
                json=data.model_dump(mode="json", exclude_unset=True),
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TenantLookupFailedError("update_company", str(e)) from e

    def _map_to_tenant(self, data: dict[str, Any]) -> Tenant:
        """Map a directory record to a Tenant model."""
        return Tenant(
            id=str(data["id"]),
            company_name=data["company_name"],
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            notice_date=data.get("notice_date"),
            max_active_users=data.get("max_active_users"),
        )


class StaticTenantGateway(ITenantGateway):
    """
    Tenant gateway over injected records.

    Keeps everything in memory, which makes it suitable for local
    development and for tests that need a deterministic directory.
    """

    def __init__(self, tenants: Optional[list[Tenant]] = None):
        self._tenants: dict[str, Tenant] = {t.id: t for t in tenants or []}
        self.lookups = 0

    async def get_company(self, key: str, value: str) -> Optional[Tenant]:
        self.lookups += 1
        for tenant in self._tenants.values():
            if str(getattr(tenant, key, None)) == str(value):
                return tenant
        return None

    async def list_companies(self) -> list[Tenant]:
        return sorted(self._tenants.values(), key=lambda t: t.company_name)

    async def create_company(self, data: TenantCreate) -> None:
        tenant = Tenant(id=str(uuid.uuid4()), **data.model_dump())
        self._tenants[tenant.id] = tenant
        logger.debug(f"Created static tenant {tenant.company_name} ({tenant.id})")

    async def update_company(self, key: str, value: str, data: TenantUpdate) -> None:
        for tenant_id, tenant in self._tenants.items():
            if str(getattr(tenant, key, None)) == str(value):
                self._tenants[tenant_id] = tenant.model_copy(
                    update=data.model_dump(exclude_unset=True)
                )
                return
