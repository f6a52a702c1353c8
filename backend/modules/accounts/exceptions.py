"""
Accounts module exceptions.

InvalidCredentialError deliberately looks the same to callers whatever the
cause (empty secret, no stored hash, mismatch). The cause is kept on the
exception as `reason` for logging only.
"""

from shared.exceptions import AuthenticationError, NotFoundError


class AccountNotFoundError(NotFoundError):
    """Raised when no account matches the given email or id."""

    def __init__(self, identifier: str):
        super().__init__("Username cannot be found", code="ACCOUNT_NOT_FOUND")
        self.identifier = identifier


class AccountDeactivatedError(AuthenticationError):
    """Raised when an inactive account tries to authenticate."""

    def __init__(self, account_id: str):
        super().__init__(
            "Your account has been deactivated",
            code="ACCOUNT_DEACTIVATED",
            details={"account_id": account_id},
        )


class InvalidCredentialError(AuthenticationError):
    """Raised when a secret is empty, no hash is stored, or the hash does not match."""

    EMPTY_SECRET = "empty_secret"
    MISSING_HASH = "missing_hash"
    MISMATCH = "mismatch"

    def __init__(self, reason: str = MISMATCH):
        super().__init__("Invalid password", code="INVALID_CREDENTIAL")
        self.reason = reason
