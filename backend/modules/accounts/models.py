"""
Accounts module data models.

Account is the public projection handed to callers and never carries a
password hash. AccountRecord and TemporaryCredential are internal to the
credential authority.
"""

import json
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class UserRole(str, Enum):
    """Closed set of account roles."""

    USER = "user"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"

    @classmethod
    def clamp(cls, value: Any) -> "UserRole":
        """Map any input onto the role set; unrecognised values become USER."""
        try:
            return cls(value)
        except ValueError:
            return cls.USER


class AccountStatus(str, Enum):
    """Known account statuses. Only ACTIVE accounts may authenticate."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class LoginMethod(str, Enum):
    """Well-known login provenance tags (other tags are allowed)."""

    PASSWORD = "password"
    SSO = "sso"


def parse_login_types(value: Any) -> list[str]:
    """
    Normalize a stored login_types value into an ordered list of tags.

    Accepts a list, a JSON-encoded list (legacy text column), a single
    scalar or None. Order of first occurrence is kept and duplicates dropped.
    """
    if value is None or value == "":
        return []
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            pass
    if not isinstance(value, (list, tuple)):
        value = [value]

    tags: list[str] = []
    for tag in value:
        tag = str(tag.value if isinstance(tag, Enum) else tag)
        if tag not in tags:
            tags.append(tag)
    return tags


class Account(BaseModel):
    """Public projection of a user account."""

    id: str = Field(..., description="Account ID")
    email: str = Field(..., description="Lowercased email address")
    role: UserRole = Field(default=UserRole.USER, description="Account role")
    status: str = Field(default=AccountStatus.ACTIVE.value, description="Account status")
    company_id: Optional[str] = Field(None, description="Tenant the account belongs to")
    terms_accepted_at: Optional[datetime] = Field(
        None,
        description="When the terms of service were last accepted",
    )
    notice_email_sent: bool = Field(
        default=False,
        description="Whether the term expiry warning was sent",
    )
    login_types: list[str] = Field(
        default_factory=list,
        description="Login methods used so far, in order of first use",
    )
    created_by_id: Optional[str] = Field(None, description="Administrator that created the account")

    model_config = {"frozen": True}

    @field_validator("id", "company_id", "created_by_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return None if value is None else str(value)

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> Any:
        return value.value if isinstance(value, Enum) else value

    @field_validator("notice_email_sent", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> Any:
        return bool(value)

    @field_validator("login_types", mode="before")
    @classmethod
    def _coerce_login_types(cls, value: Any) -> list[str]:
        return parse_login_types(value)

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE.value


class AccountRecord(Account):
    """Account row including the primary credential hash."""

    encrypted_password: Optional[str] = Field(None, description="Primary credential hash")

    def to_account(self) -> Account:
        """Drop the hash and return the public projection."""
        return Account(**self.model_dump(exclude={"encrypted_password"}))


class AccountCreate(BaseModel):
    """Insert payload for a new account."""

    email: str
    encrypted_password: Optional[str] = None
    role: UserRole = UserRole.USER
    company_id: Optional[str] = None
    created_by_id: Optional[str] = None


class AccountListing(Account):
    """Account as shown in the administrative listing, with its company name."""

    company_name: Optional[str] = Field(None, description="Name of the account's tenant")


class TemporaryCredential(BaseModel):
    """Stored temporary (recovery) credential of an account."""

    hashed: Optional[str] = Field(None, description="Hash of the temporary secret")
    expires_at: Optional[datetime] = Field(None, description="Expiry of the temporary secret")

    @property
    def is_complete(self) -> bool:
        """A temporary credential needs both a hash and an expiry to be usable."""
        return bool(self.hashed) and self.expires_at is not None
