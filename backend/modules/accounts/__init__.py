"""
Accounts module.

The account authority: authentication against stored credentials, account
status transitions, login provenance and terms-of-service acceptance.

Public API:
- IAccountService / IAccountStore: Interfaces
- AccountService: Account authority implementation
- AccountRepository: Supabase-backed credential store
- Account, AccountRecord, TemporaryCredential: Models
- UserRole, AccountStatus, LoginMethod: Enumerations
- Account exceptions: AccountNotFoundError, AccountDeactivatedError, InvalidCredentialError
"""

from .interfaces import IAccountService, IAccountStore
from .models import (
    Account,
    AccountCreate,
    AccountListing,
    AccountRecord,
    AccountStatus,
    LoginMethod,
    TemporaryCredential,
    UserRole,
    parse_login_types,
)
from .exceptions import (
    AccountDeactivatedError,
    AccountNotFoundError,
    InvalidCredentialError,
)
from .repository import (
    AccountRepository,
    get_account_repository,
    reset_account_repository,
)
from .service import AccountService, get_account_service, reset_account_service

__all__ = [
    # Interfaces
    "IAccountService",
    "IAccountStore",
    # Models
    "Account",
    "AccountCreate",
    "AccountListing",
    "AccountRecord",
    "AccountStatus",
    "LoginMethod",
    "TemporaryCredential",
    "UserRole",
    "parse_login_types",
    # Exceptions
    "AccountDeactivatedError",
    "AccountNotFoundError",
    "InvalidCredentialError",
    # Implementations
    "AccountRepository",
    "get_account_repository",
    "reset_account_repository",
    "AccountService",
    "get_account_service",
    "reset_account_service",
]
