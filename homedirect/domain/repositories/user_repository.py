"""
User Repository Interface.
Defines specific data access operations for Users.
"""

from typing import Optional

from homedirect.domain.repositories.base import BaseRepository
from homedirect.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_username(self, username: str) -> Optional[User]:
        """Case-insensitive exact username lookup."""
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive exact email lookup."""
        ...
