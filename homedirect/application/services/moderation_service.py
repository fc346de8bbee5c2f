"""Moderation service — admin approval and rejection of listings.

A listing is pending (approved=False) from creation until an admin
approves it. Rejection deletes the listing outright, from either state.
"""

from typing import List

import structlog

from homedirect.application.services import access_policy
from homedirect.application.services.listing_service import get_listing_or_404
from homedirect.domain.models.listing import Listing
from homedirect.domain.repositories.listing_repository import ListingRepository

logger = structlog.get_logger(__name__)


def list_pending(listings: ListingRepository, caller_is_admin: bool) -> List[Listing]:
    """Moderation queue."""
    access_policy.ensure_admin(caller_is_admin)
    return listings.list_pending()


def approve_listing(listings: ListingRepository, listing_id: int, caller_is_admin: bool) -> Listing:
    access_policy.ensure_admin(caller_is_admin)

    with listings.locked():
        get_listing_or_404(listings, listing_id)
        listing = listings.update(listing_id, {"approved": True})

    logger.info("Listing approved", listing_id=listing_id, owner_id=listing.user_id)
    return listing


def reject_listing(listings: ListingRepository, listing_id: int, caller_is_admin: bool) -> None:
    access_policy.ensure_admin(caller_is_admin)

    with listings.locked():
        listing = get_listing_or_404(listings, listing_id)
        listings.delete(listing_id)

    # The listing is gone after rejection; the log line is the only trace of it.
    logger.info(
        "Listing rejected",
        listing_id=listing_id,
        owner_id=listing.user_id,
        title=listing.title,
        was_approved=listing.approved,
    )
