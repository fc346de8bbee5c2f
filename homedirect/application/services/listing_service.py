"""Listing service — create, read, edit and delete listings."""

from typing import Any, List, Optional

import structlog
from pydantic import ValidationError

from homedirect.application.services import access_policy
from homedirect.application.services.listing_filter import filter_listings
from homedirect.core.exceptions import EntityNotFoundException, ValidationFailedException
from homedirect.domain.models.listing import Listing
from homedirect.domain.repositories.listing_repository import ListingRepository
from homedirect.domain.repositories.user_repository import UserRepository
from homedirect.domain.schemas.listing import ListingCreate, ListingFilter, ListingUpdate

logger = structlog.get_logger(__name__)


def _validate(schema, data: Any):
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ValidationFailedException(
            "Invalid listing data",
            details={"errors": e.errors(include_url=False, include_context=False)},
        )


def get_listing_or_404(listings: ListingRepository, listing_id: int) -> Listing:
    listing = listings.get_by_id(listing_id)
    if listing is None:
        raise EntityNotFoundException("Listing not found", details={"listing_id": listing_id})
    return listing


def create_listing(
    users: UserRepository,
    listings: ListingRepository,
    owner_id: int,
    fields: ListingCreate | dict,
) -> Listing:
    """Create a pending listing owned by a verified user."""
    owner = users.get_by_id(owner_id)
    access_policy.ensure_can_create(owner)

    data = _validate(ListingCreate, fields)
    listing = listings.create({**data.model_dump(), "user_id": owner.id})

    logger.info("Listing created", listing_id=listing.id, user_id=owner.id)
    return listing


def get_listing(
    listings: ListingRepository,
    listing_id: int,
    caller_id: Optional[int] = None,
    caller_is_admin: bool = False,
) -> Listing:
    listing = get_listing_or_404(listings, listing_id)
    access_policy.ensure_can_view(listing, caller_id, caller_is_admin)
    return listing


def list_approved(listings: ListingRepository, filters: Optional[ListingFilter] = None) -> List[Listing]:
    """Publicly visible listings matching the filters.

    Only approved listings ever reach the filter engine.
    """
    return filter_listings(listings.list_approved(), filters)


def list_user_listings(listings: ListingRepository, user_id: int) -> List[Listing]:
    """A user's own listings, pending ones included."""
    return listings.list_by_owner(user_id)


def update_listing(
    listings: ListingRepository,
    listing_id: int,
    caller_id: Optional[int],
    caller_is_admin: bool,
    partial: ListingUpdate | dict,
) -> Listing:
    """Edit a listing. An edit by a non-admin owner sends it back to moderation."""
    changes = _validate(ListingUpdate, partial).model_dump(exclude_unset=True)

    with listings.locked():
        listing = get_listing_or_404(listings, listing_id)
        access_policy.ensure_can_modify(listing, caller_id, caller_is_admin)

        if not caller_is_admin:
            changes["approved"] = False
        updated = listings.update(listing_id, changes)

    logger.info(
        "Listing updated",
        listing_id=listing_id,
        caller_id=caller_id,
        by_admin=caller_is_admin,
        approval_reset=listing.approved and not updated.approved,
        fields=sorted(k for k in changes if k != "approved"),
    )
    return updated


def delete_listing(
    listings: ListingRepository,
    listing_id: int,
    caller_id: Optional[int],
    caller_is_admin: bool,
) -> None:
    """Delete a listing; its favorites go with it."""
    with listings.locked():
        listing = get_listing_or_404(listings, listing_id)
        access_policy.ensure_can_modify(listing, caller_id, caller_is_admin)
        listings.delete(listing_id)

    logger.info("Listing deleted", listing_id=listing_id, caller_id=caller_id, by_admin=caller_is_admin)
