"""
Tenant module exceptions.
"""

from datetime import datetime
from typing import Optional

from shared.exceptions import AuthorizationError, ExternalServiceError, ValidationError


class TenantLookupFailedError(ExternalServiceError):
    """Raised when the tenant directory is unreachable or returns an error."""

    def __init__(self, operation: str, message: str):
        super().__init__(
            f"Tenant directory request '{operation}' failed: {message}",
            service="tenant_gateway",
            code="TENANT_LOOKUP_FAILED",
            details={"operation": operation},
        )


class TenantTermExpiredError(AuthorizationError):
    """Raised when a tenant's subscription window has lapsed."""

    def __init__(self, company_id: str, end_date: Optional[datetime] = None):
        super().__init__(
            "Your company subscription has expired",
            code="TENANT_TERM_EXPIRED",
            details={"company_id": company_id},
        )
        self.end_date = end_date


class InvalidTermLengthError(ValidationError):
    """Raised when a term length such as '2 weeks' cannot be parsed."""

    def __init__(self, value: str):
        super().__init__(
            f"Invalid term length: {value!r}. Expected '<count> <unit>'",
            code="INVALID_TERM_LENGTH",
            details={"value": value},
        )
