"""
In-memory Implementation of Listing Repository.
"""

from typing import Any, List

import structlog

from homedirect.core.clock import now
from homedirect.domain.models.listing import Listing
from homedirect.domain.repositories.listing_repository import ListingRepository
from homedirect.infrastructure.repositories.base_repository import InMemoryRepository, as_dict
from homedirect.infrastructure.repositories.favorite_repository import InMemoryFavoriteRepository
from homedirect.infrastructure.store import InMemoryStore

logger = structlog.get_logger(__name__)


class InMemoryListingRepository(InMemoryRepository[Listing], ListingRepository):
    """Listing repository backed by the store's listings table."""

    def __init__(self, store: InMemoryStore):
        super().__init__(store.listings, Listing)
        self.favorites = InMemoryFavoriteRepository(store)

    def create(self, obj_in: Any) -> Listing:
        obj_data = as_dict(obj_in)
        # New listings always start pending
        obj_data["approved"] = False
        obj_data.pop("updated_at", None)
        return super().create(obj_data)

    def update(self, id: int, obj_in: Any) -> Listing:
        update_data = as_dict(obj_in)
        update_data.pop("user_id", None)
        update_data.pop("created_at", None)
        update_data["updated_at"] = now()
        return super().update(id, update_data)

    def delete(self, id: int) -> Listing:
        # listings lock first, then favorites (store lock order)
        with self.table.lock:
            listing = super().delete(id)
            purged = self.favorites.purge_listing(id)
        if purged:
            logger.debug("Favorites purged with listing", listing_id=id, count=purged)
        return listing

    def list_approved(self) -> List[Listing]:
        return [listing for listing in self.list() if listing.approved]

    def list_pending(self) -> List[Listing]:
        return [listing for listing in self.list() if not listing.approved]

    def list_by_owner(self, user_id: int) -> List[Listing]:
        return [listing for listing in self.list() if listing.user_id == user_id]
