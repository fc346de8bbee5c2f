"""Favorite service — users' bookmarked listings."""

from typing import List

import structlog

from homedirect.application.services.listing_service import get_listing_or_404
from homedirect.domain.models.listing import Listing
from homedirect.domain.repositories.favorite_repository import FavoriteRepository
from homedirect.domain.repositories.listing_repository import ListingRepository

logger = structlog.get_logger(__name__)


def toggle_favorite(
    listings: ListingRepository,
    favorites: FavoriteRepository,
    caller_id: int,
    listing_id: int,
    on: bool,
) -> None:
    """Switch a favorite on or off. Both directions are idempotent."""
    if on:
        # Holding the listing lock keeps a concurrent delete from leaving an orphan pair
        with listings.locked():
            get_listing_or_404(listings, listing_id)
            favorites.add(caller_id, listing_id)
    else:
        favorites.remove(caller_id, listing_id)

    logger.info("Favorite toggled", user_id=caller_id, listing_id=listing_id, on=on)


def is_favorite(favorites: FavoriteRepository, caller_id: int, listing_id: int) -> bool:
    return favorites.exists(caller_id, listing_id)


def list_favorites(
    listings: ListingRepository,
    favorites: FavoriteRepository,
    user_id: int,
) -> List[Listing]:
    """Favorited listings that still exist and are approved."""
    result = []
    for listing_id in favorites.listing_ids_for_user(user_id):
        listing = listings.get_by_id(listing_id)
        if listing is not None and listing.approved:
            result.append(listing)
    return result
