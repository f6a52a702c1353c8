"""
Accounts module interfaces.

IAccountStore is the credential store adapter contract; IAccountService is
what transport layers and other modules call. Both are Protocols so that
tests can substitute in-memory fakes.
"""

from typing import Any, Protocol, Optional, runtime_checkable

from .models import Account, AccountCreate, AccountRecord, TemporaryCredential


@runtime_checkable
class IAccountStore(Protocol):
    """
    Storage contract for account rows.

    All updates are sparse: only the given fields are written.
    """

    def find_by_id(self, account_id: str) -> Optional[Account]:
        ...

    def find_by_email(self, email: str) -> Optional[Account]:
        ...

    def find_credentials_by_email(self, email: str) -> Optional[AccountRecord]:
        """Load an account together with its primary credential hash."""
        ...

    def list_by_company(self, company_id: str, status: Optional[str] = None) -> list[Account]:
        """List a tenant's accounts ordered by email, optionally by status."""
        ...

    def list_all(self) -> list[Account]:
        ...

    def insert(self, data: AccountCreate) -> Account:
        ...

    def update(self, account_id: str, fields: dict[str, Any]) -> None:
        ...

    def delete(self, account_id: str) -> None:
        ...

    def append_login_type(self, account_id: str, login_type: str) -> list[str]:
        """
        Atomically add a login tag if it is not present yet.

        Returns:
            The stored list of login tags after the append
        """
        ...

    def get_temporary_credential(self, account_id: str) -> Optional[TemporaryCredential]:
        """Load the temporary credential; None if the account does not exist."""
        ...


@runtime_checkable
class IAccountService(Protocol):
    """Interface for the account authority."""

    async def authenticate(self, email: str, secret: Optional[str]) -> Account:
        """
        Authenticate an account with its primary credential.

        Raises:
            InvalidCredentialError: Empty secret, no stored hash, or mismatch
            AccountNotFoundError: No account with this email
            AccountDeactivatedError: Account is not active
            TenantTermExpiredError: The account's tenant term has lapsed
            TenantLookupFailedError: The tenant directory failed
            StorageError: The credential store failed
        """
        ...

    async def create_account(
        self,
        email: str,
        secret: Optional[str] = None,
        role: Any = "user",
        company_id: Optional[str] = None,
        created_by_id: Optional[str] = None,
    ) -> Account:
        ...

    async def accept_terms_of_service(self, account_id: str) -> None:
        ...

    async def deactivate(self, account_id: str) -> None:
        ...

    async def activate(self, account_id: str) -> None:
        ...

    async def record_login_method(self, account: Account, method: str) -> Account:
        ...

    async def remove(self, account_id: str) -> None:
        ...
