"""
Credentials module interfaces.
"""

from typing import Any, Protocol, Optional, runtime_checkable

from modules.accounts.models import TemporaryCredential


@runtime_checkable
class ICredentialStore(Protocol):
    """The slice of the account store that credential changes need."""

    def get_temporary_credential(self, account_id: str) -> Optional[TemporaryCredential]:
        ...

    def update(self, account_id: str, fields: dict[str, Any]) -> None:
        ...


@runtime_checkable
class ICredentialService(Protocol):
    """Interface for temporary credentials and password changes."""

    async def issue_temporary_credential(self, account_id: str, plaintext: str) -> None:
        """Store a temporary credential, replacing any previous one."""
        ...

    async def verify_temporary_credential(self, account_id: str, plaintext: str) -> bool:
        """
        Check a temporary credential.

        Returns:
            True only if the hash matches and the credential has not expired.
            Missing credentials, mismatches and expiry all return False.
        """
        ...

    async def change_password(self, account_id: str, new_plaintext: str) -> None:
        """Replace the primary credential."""
        ...
