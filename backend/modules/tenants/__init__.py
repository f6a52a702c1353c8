"""
Tenants module.

Adapter for the external tenant (company) directory and the rules for
subscription term windows.

Public API:
- ITenantGateway / ITenantService: Interfaces
- HttpTenantGateway / StaticTenantGateway: Gateway implementations
- TenantService: Tenant lookups, creation and term checks
- Tenant, TenantCreate, TenantUpdate: Models
- TenantLookupFailedError, TenantTermExpiredError, InvalidTermLengthError
"""

from .interfaces import ITenantGateway, ITenantService
from .models import Tenant, TenantCreate, TenantUpdate
from .gateway import HttpTenantGateway, StaticTenantGateway
from .service import (
    TenantService,
    parse_term_length,
    get_tenant_gateway,
    get_tenant_service,
    reset_tenant_service,
)
from .exceptions import (
    TenantLookupFailedError,
    TenantTermExpiredError,
    InvalidTermLengthError,
)

__all__ = [
    # Interfaces
    "ITenantGateway",
    "ITenantService",
    # Models
    "Tenant",
    "TenantCreate",
    "TenantUpdate",
    # Implementations
    "HttpTenantGateway",
    "StaticTenantGateway",
    "TenantService",
    "parse_term_length",
    "get_tenant_gateway",
    "get_tenant_service",
    "reset_tenant_service",
    # Exceptions
    "TenantLookupFailedError",
    "TenantTermExpiredError",
    "InvalidTermLengthError",
]
