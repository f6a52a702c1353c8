"""
bcrypt implementation of the password hasher.

bcrypt is CPU-bound, so hashing and verification run in a worker thread
to keep the event loop responsive.
"""

import asyncio
import logging
from typing import Optional

import bcrypt

from shared.config import get_settings

from .interfaces import IPasswordHasher

logger = logging.getLogger(__name__)

# bcrypt work factor used when nothing else is configured
DEFAULT_ROUNDS = 10

# bcrypt only reads the first 72 bytes of a secret
MAX_SECRET_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:MAX_SECRET_BYTES]


class BcryptPasswordHasher(IPasswordHasher):
    """Password hasher backed by bcrypt."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """
        Initialize the hasher.

        Args:
            rounds: bcrypt cost factor (log2 of the iteration count)
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        """Configured bcrypt cost factor."""
        return self._rounds

    def hash_sync(self, plaintext: str) -> str:
        """Hash a secret on the calling thread."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(plaintext), salt).decode("utf-8")

    def verify_sync(self, plaintext: str, hashed: str) -> bool:
        """Verify a secret on the calling thread."""
        try:
            return bcrypt.checkpw(_encode(plaintext), hashed.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is malformed")
            return False

    async def hash(self, plaintext: str) -> str:
        return await asyncio.to_thread(self.hash_sync, plaintext)

    async def verify(self, plaintext: str, hashed: str) -> bool:
        return await asyncio.to_thread(self.verify_sync, plaintext, hashed)


# Module-level instance getter
_hasher_instance: Optional[BcryptPasswordHasher] = None


def get_password_hasher() -> BcryptPasswordHasher:
    """Get the password hasher singleton, configured from settings."""
    global _hasher_instance
    if _hasher_instance is None:
        _hasher_instance = BcryptPasswordHasher(rounds=get_settings().password_hash_rounds)
    return _hasher_instance


def reset_password_hasher() -> None:
    """Reset the password hasher singleton (for testing)."""
    global _hasher_instance
    _hasher_instance = None
