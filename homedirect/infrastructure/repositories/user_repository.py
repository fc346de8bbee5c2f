"""
In-memory Implementation of User Repository.
"""

from typing import Optional

from homedirect.domain.models.user import User
from homedirect.domain.repositories.user_repository import UserRepository
from homedirect.infrastructure.repositories.base_repository import InMemoryRepository
from homedirect.infrastructure.store import InMemoryStore


class InMemoryUserRepository(InMemoryRepository[User], UserRepository):
    """User repository backed by the store's users table."""

    def __init__(self, store: InMemoryStore):
        super().__init__(store.users, User)

    def _find(self, field: str, value: str) -> Optional[User]:
        needle = value.casefold()
        with self.table.lock:
            for user in self.table.rows.values():
                if getattr(user, field).casefold() == needle:
                    return user
        return None

    def get_by_username(self, username: str) -> Optional[User]:
        return self._find("username", username)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._find("email", email)
