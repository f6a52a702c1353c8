"""
Tenant module data models.

Tenants (companies) are owned by the external tenant directory; these
models mirror the records it exchanges with Warden.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Tenant(BaseModel):
    """A company record as returned by the tenant directory."""

    id: str = Field(..., description="Tenant ID")
    company_name: str = Field(..., description="Unique display name")
    start_date: Optional[datetime] = Field(None, description="Start of the subscription term")
    end_date: Optional[datetime] = Field(None, description="End of the subscription term")
    notice_date: Optional[datetime] = Field(
        None,
        description="When expiry warnings should begin (one week before end_date)",
    )
    max_active_users: Optional[int] = Field(
        None,
        description="Advisory cap on active users",
    )

    model_config = {"frozen": True}


class TenantCreate(BaseModel):
    """Payload for creating a tenant in the directory."""

    company_name: str
    max_active_users: Optional[int] = None
    start_date: Optional[datetime] = None
    end_date: datetime
    notice_date: datetime


class TenantUpdate(BaseModel):
    """
    Sparse update of a tenant's term window and/or capacity.

    Only fields that were explicitly set are sent to the directory.
    """

    end_date: Optional[datetime] = None
    notice_date: Optional[datetime] = None
    max_active_users: Optional[int] = None
