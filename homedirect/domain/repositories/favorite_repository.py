"""
Favorite Repository Interface.
A set of (user_id, listing_id) pairs.
"""

from typing import List, Protocol


class FavoriteRepository(Protocol):
    """Interface for favorite membership operations. All writes are idempotent."""

    def add(self, user_id: int, listing_id: int) -> None:
        ...

    def remove(self, user_id: int, listing_id: int) -> None:
        ...

    def exists(self, user_id: int, listing_id: int) -> bool:
        ...

    def listing_ids_for_user(self, user_id: int) -> List[int]:
        """Favorited listing ids in the order they were added."""
        ...

    def purge_listing(self, listing_id: int) -> int:
        """Drop every pair referencing the listing; returns how many were removed."""
        ...
