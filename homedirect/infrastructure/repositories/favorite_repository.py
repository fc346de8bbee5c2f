"""
In-memory Implementation of Favorite Repository.
"""

from typing import List

from homedirect.domain.models.favorite import Favorite
from homedirect.domain.repositories.favorite_repository import FavoriteRepository
from homedirect.infrastructure.store import InMemoryStore


class InMemoryFavoriteRepository(FavoriteRepository):
    """Favorite index backed by the store's ordered pair set."""

    def __init__(self, store: InMemoryStore):
        self.index = store.favorites

    def add(self, user_id: int, listing_id: int) -> None:
        with self.index.lock:
            self.index.pairs.setdefault(Favorite(user_id, listing_id), None)

    def remove(self, user_id: int, listing_id: int) -> None:
        with self.index.lock:
            self.index.pairs.pop(Favorite(user_id, listing_id), None)

    def exists(self, user_id: int, listing_id: int) -> bool:
        return Favorite(user_id, listing_id) in self.index.pairs

    def listing_ids_for_user(self, user_id: int) -> List[int]:
        with self.index.lock:
            return [f.listing_id for f in self.index.pairs if f.user_id == user_id]

    def purge_listing(self, listing_id: int) -> int:
        with self.index.lock:
            stale = [f for f in self.index.pairs if f.listing_id == listing_id]
            for favorite in stale:
                del self.index.pairs[favorite]
        return len(stale)
