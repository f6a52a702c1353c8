"""
Account repository for database access.

Encapsulates all Supabase queries and data mapping for the users table,
including the temporary credential columns.
"""

from typing import Any, Optional

from supabase import Client

from shared.database import get_supabase_client
from shared.repository import BaseRepository

from .models import (
    Account,
    AccountCreate,
    AccountRecord,
    TemporaryCredential,
    parse_login_types,
)

PUBLIC_COLUMNS = (
    "id, email, terms_accepted_at, role, company_id, status, "
    "notice_email_sent, login_types, created_by_id"
)
CREDENTIAL_COLUMNS = f"{PUBLIC_COLUMNS}, encrypted_password"


class AccountRepository(BaseRepository[Account]):
    """
    Repository for account data access.

    Emails are expected to be lowercased by the caller. This repository does
    NOT perform status or tenant checks; the account service does.
    """

    TABLE = "users"

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def find_by_id(self, account_id: str) -> Optional[Account]:
        result = self._execute(
            "find_by_id",
            self._db.table(self.TABLE).select(PUBLIC_COLUMNS).eq("id", account_id).limit(1),
        )
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def find_by_email(self, email: str) -> Optional[Account]:
        result = self._execute(
            "find_by_email",
            self._db.table(self.TABLE).select(PUBLIC_COLUMNS).eq("email", email).limit(1),
        )
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def find_credentials_by_email(self, email: str) -> Optional[AccountRecord]:
        result = self._execute(
            "find_credentials_by_email",
            self._db.table(self.TABLE).select(CREDENTIAL_COLUMNS).eq("email", email).limit(1),
        )
        if not result.data:
            return None
        return AccountRecord(**result.data[0])

    def list_by_company(self, company_id: str, status: Optional[str] = None) -> list[Account]:
        query = self._db.table(self.TABLE).select(PUBLIC_COLUMNS).eq("company_id", company_id)
        if status:
            query = query.eq("status", status)
        result = self._execute("list_by_company", query.order("email"))
        return [self._map_to_account(row) for row in result.data or []]

    def list_all(self) -> list[Account]:
        result = self._execute(
            "list_all",
            self._db.table(self.TABLE).select(PUBLIC_COLUMNS).order("email"),
        )
        return [self._map_to_account(row) for row in result.data or []]

    def get_temporary_credential(self, account_id: str) -> Optional[TemporaryCredential]:
        result = self._execute(
            "get_temporary_credential",
            self._db.table(self.TABLE)
            .select("temp_password, temp_password_expire_time")
            .eq("id", account_id)
            .limit(1),
        )
        if not result.data:
            return None
        row = result.data[0]
        return TemporaryCredential(
            hashed=row.get("temp_password"),
            expires_at=row.get("temp_password_expire_time"),
        )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def insert(self, data: AccountCreate) -> Account:
        result = self._execute(
            "insert",
            self._db.table(self.TABLE).insert(data.model_dump(mode="json")),
        )
        return self._map_to_account(result.data[0])

    def update(self, account_id: str, fields: dict[str, Any]) -> None:
        """Write only the given columns of one account."""
        self._execute(
            "update",
            self._db.table(self.TABLE).update(fields).eq("id", account_id),
        )

    def delete(self, account_id: str) -> None:
        self._execute(
            "delete",
            self._db.table(self.TABLE).delete().eq("id", account_id),
        )

    def append_login_type(self, account_id: str, login_type: str) -> list[str]:
        """
        Append a login tag in a single statement.

        The append_login_type database function locks the row and only adds
        the tag when it is absent, so concurrent appends cannot drop tags.
        """
        result = self._execute(
            "append_login_type",
            self._db.rpc(
                "append_login_type",
                {"p_user_id": account_id, "p_login_type": login_type},
            ),
        )
        return parse_login_types(result.data)

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_account(self, data: dict[str, Any]) -> Account:
        """Map a database row to the public Account model."""
        return Account(
            id=data["id"],
            email=data["email"],
            role=data.get("role") or "user",
            status=data.get("status") or "active",
            company_id=data.get("company_id"),
            terms_accepted_at=data.get("terms_accepted_at"),
            notice_email_sent=data.get("notice_email_sent") or False,
            login_types=data.get("login_types"),
            created_by_id=data.get("created_by_id"),
        )


# Module-level instance getter
_repository_instance: Optional[AccountRepository] = None


def get_account_repository(db: Optional[Client] = None) -> AccountRepository:
    """Get the account repository singleton."""
    global _repository_instance
    if _repository_instance is None:
        _repository_instance = AccountRepository(db or get_supabase_client())
    return _repository_instance


def reset_account_repository() -> None:
    """Reset the repository singleton (for testing)."""
    global _repository_instance
    _repository_instance = None
