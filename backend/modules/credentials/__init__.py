"""
Credentials module.

Temporary (password recovery) credentials and primary password changes.

Public API:
- ICredentialService / ICredentialStore: Interfaces
- CredentialService: Implementation with a configurable time-to-live
"""

from .interfaces import ICredentialService, ICredentialStore
from .service import (
    DEFAULT_TTL,
    CredentialService,
    get_credential_service,
    reset_credential_service,
)

__all__ = [
    "ICredentialService",
    "ICredentialStore",
    "DEFAULT_TTL",
    "CredentialService",
    "get_credential_service",
    "reset_credential_service",
]
