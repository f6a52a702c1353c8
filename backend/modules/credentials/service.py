"""
Temporary credential authority.

Issues time-boxed recovery credentials and verifies them lazily; nothing
sweeps expired credentials and verification has no side effects, so a
temporary credential can be checked any number of times until it expires.
"""

import logging
import secrets
from datetime import timedelta
from typing import Optional

from shared.clock import Clock, ensure_utc, utc_now
from shared.config import get_settings

from modules.accounts.repository import get_account_repository
from modules.passwords import IPasswordHasher, get_password_hasher

from .interfaces import ICredentialService, ICredentialStore

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(minutes=10)

# Bytes of entropy for generated temporary credentials
GENERATED_CREDENTIAL_BYTES = 9


class CredentialService(ICredentialService):
    """Temporary credentials and primary password changes."""

    def __init__(
        self,
        store: ICredentialStore,
        hasher: IPasswordHasher,
        ttl: timedelta = DEFAULT_TTL,
        clock: Clock = utc_now,
    ):
        self._store = store
        self._hasher = hasher
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    async def issue_temporary_credential(self, account_id: str, plaintext: str) -> None:
        hashed = await self._hasher.hash(plaintext)
        expires_at = self._clock() + self._ttl
        self._store.update(
            account_id,
            {
                "temp_password": hashed,
                "temp_password_expire_time": expires_at.isoformat(),
            },
        )
        logger.info(f"Issued temporary credential for account {account_id}")

    async def generate_temporary_credential(self, account_id: str) -> str:
        """
        Issue a random temporary credential.

        Returns:
            The plaintext, for the caller to deliver to the user
        """
        plaintext = secrets.token_urlsafe(GENERATED_CREDENTIAL_BYTES)
        await self.issue_temporary_credential(account_id, plaintext)
        return plaintext

    async def verify_temporary_credential(self, account_id: str, plaintext: str) -> bool:
        credential = self._store.get_temporary_credential(account_id)
        if credential is None or not credential.is_complete:
            return False

        matches = await self._hasher.verify(plaintext, credential.hashed)
        return matches and self._clock() < ensure_utc(credential.expires_at)

    async def change_password(self, account_id: str, new_plaintext: str) -> None:
        """Replace the primary credential; pending temporary credentials stay valid."""
        hashed = await self._hasher.hash(new_plaintext)
        self._store.update(account_id, {"encrypted_password": hashed})
        logger.info(f"Changed password for account {account_id}")


# Module-level instance getter
_service_instance: Optional[CredentialService] = None


def get_credential_service() -> CredentialService:
    """Get the credential service singleton wired to the default adapters."""
    global _service_instance
    if _service_instance is None:
        settings = get_settings()
        _service_instance = CredentialService(
            store=get_account_repository(),
            hasher=get_password_hasher(),
            ttl=timedelta(minutes=settings.temporary_credential_ttl_minutes),
        )
    return _service_instance


def reset_credential_service() -> None:
    """Reset the credential service singleton (for testing)."""
    global _service_instance
    _service_instance = None
