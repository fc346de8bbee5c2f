"""Access policy — who may see or change a listing."""

from typing import Optional

from homedirect.core.exceptions import (
    ForbiddenException,
    UnauthorizedException,
    UnverifiedException,
)
from homedirect.domain.models.listing import Listing
from homedirect.domain.models.user import User


def is_owner(listing: Listing, caller_id: Optional[int]) -> bool:
    return caller_id is not None and listing.user_id == caller_id


def can_view(listing: Listing, caller_id: Optional[int] = None, caller_is_admin: bool = False) -> bool:
    """Approved listings are public; pending ones only for their owner and admins."""
    return listing.approved or caller_is_admin or is_owner(listing, caller_id)


def ensure_can_view(listing: Listing, caller_id: Optional[int] = None, caller_is_admin: bool = False) -> None:
    if not can_view(listing, caller_id, caller_is_admin):
        raise ForbiddenException(
            "This listing is not approved yet", details={"listing_id": listing.id}
        )


def ensure_can_modify(listing: Listing, caller_id: Optional[int], caller_is_admin: bool) -> None:
    """Edit and delete are reserved to the owner and admins."""
    if not (caller_is_admin or is_owner(listing, caller_id)):
        raise ForbiddenException(
            "You don't have permission to modify this listing",
            details={"listing_id": listing.id},
        )


def ensure_admin(caller_is_admin: bool) -> None:
    if not caller_is_admin:
        raise ForbiddenException("Admin access required")


def ensure_can_create(caller: Optional[User]) -> User:
    """Listing creation needs an authenticated caller with a verified email."""
    if caller is None:
        raise UnauthorizedException("Authentication required")
    if not caller.is_verified:
        raise UnverifiedException(details={"email": caller.email})
    return caller
