"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of client failures into
StorageError.
"""

from typing import TypeVar, Generic, Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import StorageError


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() to run a query and surface failures as StorageError

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class AccountRepository(BaseRepository[Account]):
            def find_by_id(self, account_id: str) -> Optional[Account]:
                result = self._execute(
                    "find_by_id",
                    self._db.table("users").select("*").eq("id", account_id),
                )
                if not result.data:
                    return None
                return self._map_to_account(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, operation: str, query: Any) -> Any:
        """
        Execute a PostgREST query builder.

        Args:
            operation: Name of the repository operation (used in errors).
            query: A query or RPC builder exposing execute().

        Returns:
            The PostgREST response object.

        Raises:
            StorageError: If the request fails at the API or transport level.
        """
        try:
            return query.execute()
        except APIError as e:
            raise StorageError(operation, e.message or str(e)) from e
        except httpx.HTTPError as e:
            raise StorageError(operation, str(e)) from e
