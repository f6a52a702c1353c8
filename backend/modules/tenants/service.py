"""
Tenant service implementation.

Resolves tenants through an explicitly injected ITenantGateway and owns the
term-window rules (validity, notice date, term lengths).
"""

import logging
import re
from datetime import datetime, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from shared.clock import Clock, ensure_utc, utc_now
from shared.config import get_settings

from .exceptions import InvalidTermLengthError
from .gateway import HttpTenantGateway
from .interfaces import ITenantGateway, ITenantService
from .models import Tenant, TenantCreate, TenantUpdate

logger = logging.getLogger(__name__)

_TERM_PATTERN = re.compile(r"^\s*(\d+)\s+([a-zA-Z]+)\s*$")
_TERM_UNITS = {
    "day": "days",
    "days": "days",
    "week": "weeks",
    "weeks": "weeks",
    "month": "months",
    "months": "months",
    "year": "years",
    "years": "years",
}


def parse_term_length(value: str) -> relativedelta:
    """
    Parse a term length such as "2 weeks" or "1 year".

    Raises:
        InvalidTermLengthError: If the value is not "<count> <unit>"
    """
    match = _TERM_PATTERN.match(value or "")
    if not match:
        raise InvalidTermLengthError(value)
    count, unit = match.groups()
    unit_name = _TERM_UNITS.get(unit.lower())
    if unit_name is None:
        raise InvalidTermLengthError(value)
    return relativedelta(**{unit_name: int(count)})


class TenantService(ITenantService):
    """
    Tenant operations on top of the tenant directory.

    Term validity: a tenant's term is active while the current time is
    before its end_date. A missing tenant or a tenant without an end_date
    is not gated.
    """

    def __init__(
        self,
        gateway: ITenantGateway,
        clock: Clock = utc_now,
        notice_days: int = 7,
        default_term: str = "2 weeks",
    ):
        self._gateway = gateway
        self._clock = clock
        self._notice_lead = timedelta(days=notice_days)
        self._default_term = default_term

    async def get_tenant(self, company_id: Optional[str]) -> Optional[Tenant]:
        """Get a tenant by id; blank ids resolve to None without a lookup."""
        if company_id is None or not str(company_id).strip():
            return None
        return await self._gateway.get_company("id", str(company_id))

    async def find_by_name(self, company_name: str) -> Optional[Tenant]:
        """Get a tenant by its unique display name."""
        return await self._gateway.get_company("company_name", company_name)

    async def list_tenants(self) -> list[Tenant]:
        """List all tenants ordered by name."""
        return await self._gateway.list_companies()

    async def create_tenant(
        self,
        company_name: str,
        max_active_users: Optional[int],
        active_length: Optional[str] = None,
    ) -> Optional[Tenant]:
        """
        Create a tenant whose term starts now.

        Args:
            company_name: Unique display name
            max_active_users: Advisory user cap
            active_length: Term length such as "2 weeks" (defaults to the
                           configured default term)

        Returns:
            The tenant as stored by the directory
        """
        start_date = self._clock()
        end_date = start_date + parse_term_length(active_length or self._default_term)
        await self._gateway.create_company(
            TenantCreate(
                company_name=company_name,
                max_active_users=max_active_users,
                start_date=start_date,
                end_date=end_date,
                notice_date=self.notice_date_for(end_date),
            )
        )
        logger.info(f"Created tenant {company_name!r} with term ending {end_date.isoformat()}")
        return await self.find_by_name(company_name)

    async def update_end_date(self, company_id: str, end_date: datetime) -> None:
        """Move a tenant's term end (and its notice date with it)."""
        await self._gateway.update_company(
            "id",
            str(company_id),
            TenantUpdate(end_date=end_date, notice_date=self.notice_date_for(end_date)),
        )

    async def update_max_active_users(self, company_id: str, max_active_users: int) -> None:
        """Change a tenant's advisory user cap."""
        await self._gateway.update_company(
            "id",
            str(company_id),
            TenantUpdate(max_active_users=max_active_users),
        )

    def notice_date_for(self, end_date: datetime) -> datetime:
        """Expiry warnings begin one notice period before the term ends."""
        return end_date - self._notice_lead

    def is_term_active(self, tenant: Optional[Tenant], now: Optional[datetime] = None) -> bool:
        if tenant is None or tenant.end_date is None:
            return True
        now = now or self._clock()
        return ensure_utc(now) < ensure_utc(tenant.end_date)


# Module-level instance getters
_gateway_instance: Optional[HttpTenantGateway] = None
_service_instance: Optional[TenantService] = None


def get_tenant_gateway() -> HttpTenantGateway:
    """Get the HTTP tenant gateway singleton, configured from settings."""
    global _gateway_instance
    if _gateway_instance is None:
        settings = get_settings()
        _gateway_instance = HttpTenantGateway(
            base_url=settings.tenant_gateway_url,
            api_key=settings.tenant_gateway_api_key or None,
            timeout=settings.tenant_gateway_timeout,
        )
    return _gateway_instance


def get_tenant_service() -> TenantService:
    """Get the tenant service singleton wired to the HTTP gateway."""
    global _service_instance
    if _service_instance is None:
        settings = get_settings()
        _service_instance = TenantService(
            gateway=get_tenant_gateway(),
            notice_days=settings.tenant_notice_days,
            default_term=settings.default_tenant_term,
        )
    return _service_instance


def reset_tenant_service() -> None:
    """Reset the tenant gateway and service singletons (for testing)."""
    global _gateway_instance, _service_instance
    _gateway_instance = None
    _service_instance = None
