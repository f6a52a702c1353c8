"""
Password hashing interface.

Account and credential services depend on IPasswordHasher so tests can
swap in a cheaper implementation.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IPasswordHasher(Protocol):
    """Contract for a one-way password hash with verification."""

    async def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext secret.

        Args:
            plaintext: Secret to hash

        Returns:
            Opaque hash string suitable for storage
        """
        ...

    async def verify(self, plaintext: str, hashed: str) -> bool:
        """
        Check a plaintext secret against a stored hash.

        Args:
            plaintext: Candidate secret
            hashed: Previously stored hash

        Returns:
            True if the secret matches, False otherwise (including
            malformed hashes)
        """
        ...
