"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
an in-memory account store, a settable clock, a fast password hasher and a
static tenant directory.
"""

import itertools
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import pytest

from modules.accounts.models import (
    Account,
    AccountCreate,
    AccountRecord,
    TemporaryCredential,
    parse_login_types,
)
from modules.accounts.service import AccountService, reset_account_service
from modules.accounts.repository import reset_account_repository
from modules.credentials.service import CredentialService, reset_credential_service
from modules.entitlements.repository import reset_partner_permission_repository
from modules.entitlements.service import reset_entitlement_service
from modules.passwords import BcryptPasswordHasher, reset_password_hasher
from modules.tenants import StaticTenantGateway, Tenant, TenantService, reset_tenant_service
from modules.weights.repository import reset_weights_repository
from modules.weights.service import reset_weights_service

# Minimum bcrypt cost keeps the suite fast
TEST_HASH_ROUNDS = 4

FIXED_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Callable clock whose time only moves when a test says so."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class InMemoryAccountStore:
    """
    IAccountStore implementation backed by a dict of rows.

    Rows are plain dicts holding the same columns as the users table.
    `calls` counts every store operation by name.
    """

    def __init__(self):
        self.rows: dict[str, dict[str, Any]] = {}
        self.calls: Counter = Counter()
        self._ids = itertools.count(1)

    def _public(self, row: dict[str, Any]) -> Account:
        return Account(**{k: v for k, v in row.items() if k in Account.model_fields})

    def find_by_id(self, account_id: str) -> Optional[Account]:
        self.calls["find_by_id"] += 1
        row = self.rows.get(str(account_id))
        return self._public(row) if row else None

    def find_by_email(self, email: str) -> Optional[Account]:
        self.calls["find_by_email"] += 1
        for row in self.rows.values():
            if row["email"] == email:
                return self._public(row)
        return None

    def find_credentials_by_email(self, email: str) -> Optional[AccountRecord]:
        self.calls["find_credentials_by_email"] += 1
        for row in self.rows.values():
            if row["email"] == email:
                return AccountRecord(
                    **{k: v for k, v in row.items() if k in AccountRecord.model_fields}
                )
        return None

    def list_by_company(self, company_id: str, status: Optional[str] = None) -> list[Account]:
        self.calls["list_by_company"] += 1
        rows = [
            row for row in self.rows.values()
            if row["company_id"] == company_id and (status is None or row["status"] == status)
        ]
        return [self._public(row) for row in sorted(rows, key=lambda r: r["email"])]

    def list_all(self) -> list[Account]:
        self.calls["list_all"] += 1
        return [self._public(row) for row in sorted(self.rows.values(), key=lambda r: r["email"])]

    def insert(self, data: AccountCreate) -> Account:
        self.calls["insert"] += 1
        account_id = str(next(self._ids))
        self.rows[account_id] = {
            "id": account_id,
            "email": data.email,
            "encrypted_password": data.encrypted_password,
            "role": data.role.value,
            "status": "active",
            "company_id": data.company_id,
            "created_by_id": data.created_by_id,
            "terms_accepted_at": None,
            "notice_email_sent": False,
            "login_types": [],
            "temp_password": None,
            "temp_password_expire_time": None,
        }
        return self._public(self.rows[account_id])

    def update(self, account_id: str, fields: dict[str, Any]) -> None:
        self.calls["update"] += 1
        row = self.rows.get(str(account_id))
        if row is not None:
            row.update(fields)

    def delete(self, account_id: str) -> None:
        self.calls["delete"] += 1
        self.rows.pop(str(account_id), None)

    def append_login_type(self, account_id: str, login_type: str) -> list[str]:
        self.calls["append_login_type"] += 1
        row = self.rows.get(str(account_id))
        if row is None:
            return []
        login_types = parse_login_types(row["login_types"])
        if login_type not in login_types:
            login_types.append(login_type)
        row["login_types"] = login_types
        return list(login_types)

    def get_temporary_credential(self, account_id: str) -> Optional[TemporaryCredential]:
        self.calls["get_temporary_credential"] += 1
        row = self.rows.get(str(account_id))
        if row is None:
            return None
        return TemporaryCredential(
            hashed=row["temp_password"],
            expires_at=row["temp_password_expire_time"],
        )

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset module singletons before and after each test."""
    resets = (
        reset_account_service,
        reset_account_repository,
        reset_credential_service,
        reset_entitlement_service,
        reset_partner_permission_repository,
        reset_password_hasher,
        reset_tenant_service,
        reset_weights_service,
        reset_weights_repository,
    )
    for reset in resets:
        reset()
    yield
    for reset in resets:
        reset()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=TEST_HASH_ROUNDS)


@pytest.fixture
def account_store() -> InMemoryAccountStore:
    return InMemoryAccountStore()


@pytest.fixture
def active_tenant() -> Tenant:
    return Tenant(
        id="company-active",
        company_name="Active Co",
        start_date=FIXED_NOW - timedelta(days=30),
        end_date=FIXED_NOW + timedelta(days=30),
        notice_date=FIXED_NOW + timedelta(days=23),
        max_active_users=10,
    )


@pytest.fixture
def expired_tenant() -> Tenant:
    return Tenant(
        id="company-expired",
        company_name="Expired Co",
        start_date=FIXED_NOW - timedelta(days=60),
        end_date=FIXED_NOW - timedelta(days=1),
        notice_date=FIXED_NOW - timedelta(days=8),
        max_active_users=5,
    )


@pytest.fixture
def tenant_gateway(active_tenant, expired_tenant) -> StaticTenantGateway:
    return StaticTenantGateway([active_tenant, expired_tenant])


@pytest.fixture
def tenant_service(tenant_gateway, clock) -> TenantService:
    return TenantService(gateway=tenant_gateway, clock=clock)


@pytest.fixture
def account_service(account_store, tenant_service, hasher, clock) -> AccountService:
    return AccountService(
        store=account_store,
        tenants=tenant_service,
        hasher=hasher,
        clock=clock,
    )


@pytest.fixture
def credential_service(account_store, hasher, clock) -> CredentialService:
    return CredentialService(store=account_store, hasher=hasher, clock=clock)
