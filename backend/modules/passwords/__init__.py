"""
Password hashing module.

Wraps the one-way adaptive hash used for primary and temporary credentials.

Public API:
- IPasswordHasher: Interface for hash/verify operations
- BcryptPasswordHasher: bcrypt implementation
- get_password_hasher: Configured hasher singleton
"""

from .interfaces import IPasswordHasher
from .service import (
    BcryptPasswordHasher,
    get_password_hasher,
    reset_password_hasher,
)

__all__ = [
    "IPasswordHasher",
    "BcryptPasswordHasher",
    "get_password_hasher",
    "reset_password_hasher",
]
