"""
Account authority implementation.

Owns authentication, account status transitions, login provenance and
terms-of-service acceptance. Storage, the tenant directory and password
hashing are injected collaborators.
"""

import logging
from typing import Any, Optional

from shared.clock import Clock, utc_now

from modules.passwords import IPasswordHasher, get_password_hasher
from modules.tenants import ITenantService, TenantTermExpiredError, get_tenant_service

from .exceptions import (
    AccountDeactivatedError,
    AccountNotFoundError,
    InvalidCredentialError,
)
from .interfaces import IAccountService, IAccountStore
from .models import Account, AccountCreate, AccountListing, AccountStatus, UserRole, parse_login_types
from .repository import get_account_repository

logger = logging.getLogger(__name__)


class AccountService(IAccountService):
    """
    Implementation of the account authority.

    Authentication checks run in a fixed order: account existence, status,
    tenant term, then the secret. A deactivated account or an expired tenant
    therefore reports its own reason instead of a credential failure.
    """

    def __init__(
        self,
        store: IAccountStore,
        tenants: ITenantService,
        hasher: IPasswordHasher,
        clock: Clock = utc_now,
    ):
        self._store = store
        self._tenants = tenants
        self._hasher = hasher
        self._clock = clock
        self._dummy_hash: Optional[str] = None

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------

    async def authenticate(self, email: str, secret: Optional[str]) -> Account:
        if not secret:
            raise InvalidCredentialError(InvalidCredentialError.EMPTY_SECRET)

        record = self._store.find_credentials_by_email(email.lower())
        if record is None:
            await self._burn_verification(secret)
            logger.info("Authentication failed: unknown account")
            raise AccountNotFoundError(email.lower())

        if not record.is_active:
            logger.info(f"Authentication failed for account {record.id}: status {record.status}")
            raise AccountDeactivatedError(record.id)

        tenant = await self._tenants.get_tenant(record.company_id)
        if not self._tenants.is_term_active(tenant, self._clock()):
            logger.info(
                f"Authentication failed for account {record.id}: "
                f"tenant {record.company_id} term expired"
            )
            raise TenantTermExpiredError(str(record.company_id), tenant.end_date)

        if not record.encrypted_password:
            await self._burn_verification(secret)
            self._log_credential_failure(record.id, InvalidCredentialError.MISSING_HASH)
            raise InvalidCredentialError(InvalidCredentialError.MISSING_HASH)

        if not await self._hasher.verify(secret, record.encrypted_password):
            self._log_credential_failure(record.id, InvalidCredentialError.MISMATCH)
            raise InvalidCredentialError(InvalidCredentialError.MISMATCH)

        return record.to_account()

    async def _burn_verification(self, secret: str) -> None:
        """Spend one hash comparison so early failures take about as long as a mismatch."""
        if self._dummy_hash is None:
            self._dummy_hash = await self._hasher.hash("warden-timing-equalizer")
        await self._hasher.verify(secret, self._dummy_hash)

    def _log_credential_failure(self, account_id: str, reason: str) -> None:
        logger.info(f"Authentication failed for account {account_id}: {reason}")

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def create_account(
        self,
        email: str,
        secret: Optional[str] = None,
        role: Any = "user",
        company_id: Optional[str] = None,
        created_by_id: Optional[str] = None,
    ) -> Account:
        """
        Create an account on behalf of an administrator.

        A missing secret stores no credential; such an account cannot use
        password authentication until a password is set.
        """
        encrypted_password = await self._hasher.hash(secret) if secret else None
        account = self._store.insert(
            AccountCreate(
                email=email.lower(),
                encrypted_password=encrypted_password,
                role=UserRole.clamp(role),
                company_id=company_id,
                created_by_id=created_by_id,
            )
        )
        logger.info(f"Created account {account.id} with role {account.role.value}")
        return account

    async def accept_terms_of_service(self, account_id: str) -> None:
        self._store.update(account_id, {"terms_accepted_at": self._clock().isoformat()})

    async def deactivate(self, account_id: str) -> None:
        self._store.update(account_id, {"status": AccountStatus.INACTIVE.value})

    async def activate(self, account_id: str) -> None:
        self._store.update(account_id, {"status": AccountStatus.ACTIVE.value})

    async def set_role(self, account_id: str, role: Any) -> UserRole:
        """Change an account's role, clamped to the known roles."""
        clamped = UserRole.clamp(role)
        self._store.update(account_id, {"role": clamped.value})
        return clamped

    async def mark_notice_email_sent(self, account_id: str) -> None:
        self._store.update(account_id, {"notice_email_sent": True})

    async def remove(self, account_id: str) -> None:
        """Permanently delete an account."""
        self._store.delete(account_id)
        logger.info(f"Removed account {account_id}")

    # -------------------------------------------------------------------------
    # Login provenance
    # -------------------------------------------------------------------------

    def get_login_methods(self, account: Optional[Account]) -> list[str]:
        if account is None:
            return []
        return parse_login_types(account.login_types)

    async def record_login_method(self, account: Account, method: str) -> Account:
        """
        Record that an account has logged in with the given method.

        Returns the account unchanged when the method is already known.
        Otherwise returns a copy carrying the stored list; callers must keep
        using the returned account.
        """
        method = str(getattr(method, "value", method))
        if method in self.get_login_methods(account):
            return account
        login_types = self._store.append_login_type(account.id, method)
        return account.model_copy(update={"login_types": login_types})

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def get_account(self, account_id: str) -> Optional[Account]:
        return self._store.find_by_id(account_id)

    async def find_by_email(self, email: str) -> Optional[Account]:
        return self._store.find_by_email(email.lower())

    async def list_tenant_accounts(self, company_id: str) -> list[Account]:
        return self._store.list_by_company(company_id)

    async def list_active_tenant_accounts(self, company_id: str) -> list[Account]:
        return self._store.list_by_company(company_id, status=AccountStatus.ACTIVE.value)

    async def list_accounts(self) -> list[Account]:
        return self._store.list_all()

    async def list_accounts_with_company_names(self) -> list[AccountListing]:
        """
        List every account ordered by email, each with its tenant's name.

        Tenants are fetched once; accounts without a tenant, or whose tenant
        the directory does not know, get no company name.
        """
        names = {tenant.id: tenant.company_name for tenant in await self._tenants.list_tenants()}
        return [
            AccountListing(**account.model_dump(), company_name=names.get(account.company_id))
            for account in self._store.list_all()
        ]


# Module-level instance getter
_service_instance: Optional[AccountService] = None


def get_account_service() -> AccountService:
    """Get the account service singleton wired to the default adapters."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AccountService(
            store=get_account_repository(),
            tenants=get_tenant_service(),
            hasher=get_password_hasher(),
        )
    return _service_instance


def reset_account_service() -> None:
    """Reset the account service singleton (for testing)."""
    global _service_instance
    _service_instance = None
